from fractal_kernels.kernels.reaction_diffusion.provider import \
    GrayScottStateProvider  # noqa: F401
from fractal_kernels.kernels.reaction_diffusion.state import (  # noqa: F401
    DEFAULT_FEED, DEFAULT_KILL, FEED_RANGE, KILL_RANGE, GrayScottParameters,
    GrayScottState)
from fractal_kernels.kernels.reaction_diffusion.stepper import (  # noqa: F401
    LAPLACIAN_KERNEL, GrayScottStepper, laplacian_convolve, laplacian_roll)
