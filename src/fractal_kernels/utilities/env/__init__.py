"""Environment configuration helpers."""

from fractal_kernels.utilities.env.config import Configuration as Configuration
from fractal_kernels.utilities.env.enums import \
    EscapeInteriorStrategy as EscapeInteriorStrategy
from fractal_kernels.utilities.env.enums import \
    LaplacianStrategy as LaplacianStrategy
