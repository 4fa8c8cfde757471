from fractal_kernels.kernels.ifs.provider import \
    ChaosGameStateProvider  # noqa: F401
from fractal_kernels.kernels.ifs.state import (  # noqa: F401
    ChaosGameParameters, ChaosGameState)
from fractal_kernels.kernels.ifs.transforms import (  # noqa: F401
    BARNSLEY_FERN, SIERPINSKI_GASKET, AffineMap, IteratedFunctionSystem)
