from fractal_kernels.kernels.parametric.curves import (  # noqa: F401
    flower_of_life, maurer_rose, phyllotaxis, rose_curve, superformula)
from fractal_kernels.kernels.parametric.fields import (  # noqa: F401
    chladni_modes, chladni_value, interference_field, shake_particles,
    wave_sources)
from fractal_kernels.kernels.parametric.lifecycle import (  # noqa: F401
    CYCLE_SECONDS, LifecycleFrame, LifecyclePhase, cycle_position,
    lifecycle_frame, lifecycle_phase)
from fractal_kernels.kernels.parametric.provider import (  # noqa: F401
    ChladniStateProvider, LifecycleFlowerStateProvider,
    WaveInterferenceStateProvider)
from fractal_kernels.kernels.parametric.state import (  # noqa: F401
    ChladniParameters, ChladniState, LifecycleParameters, WaveParameters,
    WaveState)
