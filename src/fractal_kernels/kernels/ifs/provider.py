from __future__ import annotations

import random

import reactivex
from reactivex import operators as ops

from fractal_kernels.kernels.ifs.state import (ChaosGameParameters,
                                               ChaosGameState)
from fractal_kernels.kernels.ifs.transforms import (BARNSLEY_FERN,
                                                    IteratedFunctionSystem)
from fractal_kernels.kernels.providers import (RngStateProvider,
                                               parameterized_stream)
from fractal_kernels.runtime.frame_scheduler import FrameScheduler
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)


class ChaosGameStateProvider(RngStateProvider[ChaosGameState]):
    """Streams a growing point cloud, restarting whenever parameters change."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        system: IteratedFunctionSystem = BARNSLEY_FERN,
        parameters: reactivex.Observable[ChaosGameParameters] | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng=rng)
        self._scheduler = scheduler
        self._system = system
        self._parameters = (
            parameters
            if parameters is not None
            else reactivex.just(ChaosGameParameters())
        )

    def initial_state(self, parameters: ChaosGameParameters) -> ChaosGameState:
        return ChaosGameState.empty(parameters.capacity)

    def next_state(
        self, state: ChaosGameState, parameters: ChaosGameParameters
    ) -> ChaosGameState:
        visited, point = self._system.sample(
            state.point, parameters.points_per_frame, self.rng
        )
        state.samples.extend(visited)
        state.point = point
        state.generated += len(visited)
        state.latest = visited
        return state

    def observable(self) -> reactivex.Observable[ChaosGameState]:
        def build_stream(
            parameters: ChaosGameParameters,
        ) -> reactivex.Observable[ChaosGameState]:
            logger.info("Restarting chaos game with %s", parameters)
            seeded_state = self.initial_state(parameters)
            return self._scheduler.frames.pipe(
                ops.scan(
                    lambda state, _: self.next_state(state, parameters),
                    seed=seeded_state,
                ),
                ops.start_with(seeded_state),
            )

        return parameterized_stream(self._parameters, build_stream)
