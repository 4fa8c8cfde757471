from __future__ import annotations

from fractal_kernels.kernels.escape_time.evaluator import (julia_grid,
                                                           mandelbrot_grid,
                                                           smooth_iteration)
from fractal_kernels.kernels.escape_time.plane import (julia_plane,
                                                       mandelbrot_plane)
from fractal_kernels.kernels.escape_time.state import (EscapeTimeParameters,
                                                       EscapeTimeState)
from fractal_kernels.utilities.env import Configuration, EscapeInteriorStrategy
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)


class EscapeTimeField:
    """Evaluates whole pixel grids and caches the last result per parameter set."""

    def __init__(self) -> None:
        self.cached_result: EscapeTimeState | None = None
        self.last_params: EscapeTimeParameters | None = None

    def evaluate(self, parameters: EscapeTimeParameters) -> EscapeTimeState:
        if parameters.max_iterations < 0:
            raise ValueError("max_iterations must be non-negative")
        if self.cached_result is not None and self.last_params == parameters:
            return self.cached_result

        view = parameters.view
        if parameters.is_julia:
            re, im = julia_plane(view)
            c = parameters.julia_constant
            counts, moduli = julia_grid(
                re, im, c.real, c.imag, parameters.max_iterations
            )
        else:
            re, im = mandelbrot_plane(view)
            use_interior_check = (
                Configuration.escape_interior_strategy()
                == EscapeInteriorStrategy.CARDIOID
            )
            counts, moduli = mandelbrot_grid(
                re, im, parameters.max_iterations, use_interior_check
            )

        logger.debug(
            "Evaluated %sx%s escape-time grid (julia=%s)",
            parameters.width,
            parameters.height,
            parameters.is_julia,
        )
        self.cached_result = EscapeTimeState(
            parameters=parameters, counts=counts, moduli=moduli
        )
        self.last_params = parameters
        return self.cached_result

    def smooth(self, state: EscapeTimeState):
        return smooth_iteration(
            state.counts, state.moduli, state.parameters.max_iterations
        )
