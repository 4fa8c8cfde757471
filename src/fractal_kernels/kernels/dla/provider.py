from __future__ import annotations

import random

import reactivex
from reactivex import operators as ops

from fractal_kernels.kernels.dla.grower import DLAGrower
from fractal_kernels.kernels.dla.state import DLAParameters, DLAState
from fractal_kernels.kernels.providers import (RngStateProvider,
                                               parameterized_stream)
from fractal_kernels.runtime.frame_scheduler import FrameScheduler
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)


class DLAStateProvider(RngStateProvider[DLAState]):
    """Grows a fresh cluster whenever the parameters change."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        parameters: reactivex.Observable[DLAParameters] | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng=rng)
        self._scheduler = scheduler
        self._parameters = (
            parameters if parameters is not None else reactivex.just(DLAParameters())
        )

    def grower(self, parameters: DLAParameters) -> DLAGrower:
        return DLAGrower(parameters, rng=self.rng)

    def observable(self) -> reactivex.Observable[DLAState]:
        def build_stream(
            parameters: DLAParameters,
        ) -> reactivex.Observable[DLAState]:
            logger.info("Restarting DLA growth with %s", parameters)
            grower = self.grower(parameters)

            def advance(state: DLAState, _) -> DLAState:
                grower.step()
                return grower.state

            return self._scheduler.frames.pipe(
                ops.scan(advance, seed=grower.state),
                ops.start_with(grower.state),
            )

        return parameterized_stream(self._parameters, build_stream)
