from fractal_kernels.utilities.env.kernels import KernelConfiguration
from fractal_kernels.utilities.env.runtime import RuntimeConfiguration


class Configuration(
    RuntimeConfiguration,
    KernelConfiguration,
):
    """Aggregate environment configuration helpers."""
