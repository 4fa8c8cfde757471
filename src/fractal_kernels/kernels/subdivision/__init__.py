from fractal_kernels.kernels.subdivision.branching import (  # noqa: F401
    Branch, breathing_scale, bronchial_tree)
from fractal_kernels.kernels.subdivision.engine import (  # noqa: F401
    leaf_count, subdivide)
from fractal_kernels.kernels.subdivision.primitives import (  # noqa: F401
    MENGER_RETAINED_OFFSETS, Cube, Tetrahedron, Triangle, equilateral_triangle,
    menger_sponge, regular_tetrahedron, sierpinski_tetrahedron,
    sierpinski_triangle)
from fractal_kernels.kernels.subdivision.projection import (  # noqa: F401
    ProjectedCube, ProjectedPoint, project, project_cubes, rodrigues_rotate,
    rotate_x, rotate_y)
from fractal_kernels.kernels.subdivision.provider import (  # noqa: F401
    BRONCHIAL_SPIN, MENGER_SPIN, TETRAHEDRON_SPIN, BronchialTreeStateProvider,
    SpinningGeometryProvider, SpinStateProvider)
from fractal_kernels.kernels.subdivision.state import (  # noqa: F401
    SpinningGeometry, SpinState)
