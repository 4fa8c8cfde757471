import os

from fractal_kernels.utilities.env.enums import (EscapeInteriorStrategy,
                                                 LaplacianStrategy)
from fractal_kernels.utilities.env.parsing import _env_int, _env_optional_int

DEFAULT_ESCAPE_INTERIOR_STRATEGY = EscapeInteriorStrategy.CARDIOID
DEFAULT_LAPLACIAN_STRATEGY = LaplacianStrategy.CONVOLVE


class KernelConfiguration:
    @classmethod
    def escape_interior_strategy(cls) -> EscapeInteriorStrategy:
        strategy = os.environ.get(
            "FRACTAL_ESCAPE_INTERIOR_STRATEGY",
            DEFAULT_ESCAPE_INTERIOR_STRATEGY.value,
        ).strip()
        try:
            return EscapeInteriorStrategy(strategy.lower())
        except ValueError as exc:
            raise ValueError(
                "FRACTAL_ESCAPE_INTERIOR_STRATEGY must be 'none' or 'cardioid'"
            ) from exc

    @classmethod
    def laplacian_strategy(cls) -> LaplacianStrategy:
        strategy = (
            os.environ.get(
                "FRACTAL_RD_LAPLACIAN_STRATEGY", DEFAULT_LAPLACIAN_STRATEGY.value
            )
            .strip()
            .lower()
        )
        try:
            return LaplacianStrategy(strategy)
        except ValueError as exc:
            raise ValueError(
                "FRACTAL_RD_LAPLACIAN_STRATEGY must be 'convolve' or 'roll'"
            ) from exc

    @classmethod
    def reaction_diffusion_substeps(cls) -> int:
        return _env_int("FRACTAL_RD_SUBSTEPS", default=5, minimum=1)

    @classmethod
    def dla_walkers(cls) -> int:
        return _env_int("FRACTAL_DLA_WALKERS", default=100, minimum=1)

    @classmethod
    def trail_capacity(cls) -> int:
        return _env_int("FRACTAL_TRAIL_CAPACITY", default=2000, minimum=1)

    @classmethod
    def seed(cls) -> int | None:
        return _env_optional_int("FRACTAL_SEED", minimum=0)
