from fractal_kernels.kernels.circle_packing.descartes import (  # noqa: F401
    Circle, companion_circles, descartes_centers, descartes_curvatures,
    tangency_error)
from fractal_kernels.kernels.circle_packing.packing import (  # noqa: F401
    ApollonianPacker, apollonian_gasket, standard_configuration)
from fractal_kernels.kernels.circle_packing.provider import (  # noqa: F401
    CirclePackingStateProvider, build_packing)
from fractal_kernels.kernels.circle_packing.state import (  # noqa: F401
    PackingParameters, PackingState)
