from __future__ import annotations

import numpy as np
import reactivex
from reactivex import operators as ops

from fractal_kernels.kernels.providers import (ObservableProvider,
                                               parameterized_stream,
                                               resolve_rng)
from fractal_kernels.kernels.reaction_diffusion.state import (
    GrayScottParameters, GrayScottState)
from fractal_kernels.kernels.reaction_diffusion.stepper import \
    GrayScottStepper
from fractal_kernels.runtime.frame_scheduler import FrameScheduler
from fractal_kernels.utilities.env import Configuration
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)


class GrayScottStateProvider(ObservableProvider[GrayScottState]):
    def __init__(
        self,
        scheduler: FrameScheduler,
        parameters: reactivex.Observable[GrayScottParameters] | None = None,
        *,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._parameters = (
            parameters
            if parameters is not None
            else reactivex.just(GrayScottParameters())
        )
        self._rng = rng if rng is not None else resolve_rng()

    def initial_state(self, parameters: GrayScottParameters) -> GrayScottState:
        return GrayScottState.seeded(parameters.width, parameters.height, self._rng)

    def observable(self) -> reactivex.Observable[GrayScottState]:
        def build_stream(
            parameters: GrayScottParameters,
        ) -> reactivex.Observable[GrayScottState]:
            logger.info("Reseeding Gray-Scott field with %s", parameters)
            stepper = GrayScottStepper(parameters.feed, parameters.kill)
            substeps = (
                parameters.substeps
                if parameters.substeps is not None
                else Configuration.reaction_diffusion_substeps()
            )
            seeded_state = self.initial_state(parameters)
            return self._scheduler.frames.pipe(
                ops.scan(
                    lambda state, _: stepper.advance(state, substeps),
                    seed=seeded_state,
                ),
                ops.start_with(seeded_state),
            )

        return parameterized_stream(self._parameters, build_stream)
