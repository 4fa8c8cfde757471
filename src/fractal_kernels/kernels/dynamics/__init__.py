from fractal_kernels.kernels.dynamics.lorenz import (  # noqa: F401
    LORENZ_START, LorenzSystem, project)
from fractal_kernels.kernels.dynamics.pendulum import (  # noqa: F401
    BobPositions, DoublePendulum, PendulumState)
from fractal_kernels.kernels.dynamics.provider import (  # noqa: F401
    DoublePendulumStateProvider, LorenzStateProvider, advance_lorenz,
    advance_pendulum)
from fractal_kernels.kernels.dynamics.state import (  # noqa: F401
    LorenzParameters, LorenzRunState, PendulumParameters, PendulumRunState)
from fractal_kernels.kernels.dynamics.trail import TrailBuffer  # noqa: F401
