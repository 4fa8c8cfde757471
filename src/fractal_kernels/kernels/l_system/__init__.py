from fractal_kernels.kernels.l_system.grammar import (  # noqa: F401
    PRESETS, LSystemGrammar, expand, expanded_length, rewrite)
from fractal_kernels.kernels.l_system.provider import \
    LSystemStateProvider  # noqa: F401
from fractal_kernels.kernels.l_system.state import LSystemState  # noqa: F401
from fractal_kernels.kernels.l_system.turtle import (  # noqa: F401
    BoundingBox, Segment, TurtleDrawing, TurtleState, ViewportFit,
    fit_to_viewport, interpret)
