from fractal_kernels.kernels.dla.grower import DLAGrower  # noqa: F401
from fractal_kernels.kernels.dla.provider import DLAStateProvider  # noqa: F401
from fractal_kernels.kernels.dla.state import (  # noqa: F401
    DLAParameters, DLAState, StuckCell, Walker)
