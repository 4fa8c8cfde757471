from fractal_kernels.kernels.escape_time.evaluator import (  # noqa: F401
    EscapeResult, escape_time, julia, julia_grid, mandelbrot, mandelbrot_grid,
    smooth_iteration)
from fractal_kernels.kernels.escape_time.field import \
    EscapeTimeField  # noqa: F401
from fractal_kernels.kernels.escape_time.plane import (  # noqa: F401
    PlaneView, julia_plane, julia_point, mandelbrot_plane, mandelbrot_point)
from fractal_kernels.kernels.escape_time.provider import \
    EscapeTimeStateProvider  # noqa: F401
from fractal_kernels.kernels.escape_time.state import (  # noqa: F401
    EscapeTimeParameters, EscapeTimeState)
