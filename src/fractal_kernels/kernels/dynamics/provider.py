from __future__ import annotations

import reactivex
from reactivex import operators as ops

from fractal_kernels.kernels.dynamics.lorenz import BASE_DT, LorenzSystem
from fractal_kernels.kernels.dynamics.pendulum import DoublePendulum
from fractal_kernels.kernels.dynamics.state import (LorenzParameters,
                                                    LorenzRunState,
                                                    PendulumParameters,
                                                    PendulumRunState)
from fractal_kernels.kernels.dynamics.trail import TrailBuffer
from fractal_kernels.kernels.providers import (ObservableProvider,
                                               parameterized_stream)
from fractal_kernels.runtime.frame_scheduler import FrameScheduler
from fractal_kernels.utilities.env import Configuration
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)


def advance_lorenz(
    state: LorenzRunState, system: LorenzSystem, parameters: LorenzParameters
) -> LorenzRunState:
    visited = system.integrate(
        state.point, parameters.substeps, BASE_DT * parameters.speed
    )
    if visited:
        state.trail.extend(visited)
        state.point = visited[-1]
    state.steps += len(visited)
    return state


def advance_pendulum(
    state: PendulumRunState, pendulum: DoublePendulum, parameters: PendulumParameters
) -> PendulumRunState:
    state.pendulum = pendulum.step(state.pendulum)
    bobs = pendulum.positions(state.pendulum, parameters.pivot)
    state.trail.append((bobs.x2, bobs.y2))
    state.frames += 1
    return state


class LorenzStateProvider(ObservableProvider[LorenzRunState]):
    def __init__(
        self,
        scheduler: FrameScheduler,
        parameters: reactivex.Observable[LorenzParameters] | None = None,
        system: LorenzSystem | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._parameters = (
            parameters if parameters is not None else reactivex.just(LorenzParameters())
        )
        self._system = system or LorenzSystem()

    def initial_state(self, parameters: LorenzParameters) -> LorenzRunState:
        capacity = (
            parameters.capacity
            if parameters.capacity is not None
            else Configuration.trail_capacity()
        )
        return LorenzRunState(trail=TrailBuffer(capacity))

    def observable(self) -> reactivex.Observable[LorenzRunState]:
        def build_stream(
            parameters: LorenzParameters,
        ) -> reactivex.Observable[LorenzRunState]:
            logger.info("Restarting Lorenz trajectory with %s", parameters)
            seeded_state = self.initial_state(parameters)
            return self._scheduler.frames.pipe(
                ops.scan(
                    lambda state, _: advance_lorenz(state, self._system, parameters),
                    seed=seeded_state,
                ),
                ops.start_with(seeded_state),
            )

        return parameterized_stream(self._parameters, build_stream)


class DoublePendulumStateProvider(ObservableProvider[PendulumRunState]):
    """Releases both arms from horizontal whenever the parameters change."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        parameters: reactivex.Observable[PendulumParameters] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._parameters = (
            parameters
            if parameters is not None
            else reactivex.just(PendulumParameters())
        )

    def observable(self) -> reactivex.Observable[PendulumRunState]:
        def build_stream(
            parameters: PendulumParameters,
        ) -> reactivex.Observable[PendulumRunState]:
            logger.info("Releasing double pendulum with %s", parameters)
            pendulum = DoublePendulum(gravity=parameters.gravity)
            seeded_state = PendulumRunState(trail=TrailBuffer(parameters.trail_length))
            return self._scheduler.frames.pipe(
                ops.scan(
                    lambda state, _: advance_pendulum(state, pendulum, parameters),
                    seed=seeded_state,
                ),
                ops.start_with(seeded_state),
            )

        return parameterized_stream(self._parameters, build_stream)
