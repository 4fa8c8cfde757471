from __future__ import annotations

import numpy as np
import reactivex
from reactivex import operators as ops

from fractal_kernels.kernels.parametric.fields import (WAVE_TIME_STEP,
                                                       chladni_modes,
                                                       interference_field,
                                                       shake_particles,
                                                       wave_sources)
from fractal_kernels.kernels.parametric.lifecycle import (NOISE_SAMPLES,
                                                          LifecycleFrame,
                                                          lifecycle_frame)
from fractal_kernels.kernels.parametric.state import (ChladniParameters,
                                                      ChladniState,
                                                      LifecycleParameters,
                                                      WaveParameters,
                                                      WaveState)
from fractal_kernels.kernels.providers import (ObservableProvider,
                                               parameterized_stream,
                                               resolve_rng)
from fractal_kernels.runtime.frame_scheduler import FrameScheduler


class ChladniStateProvider(ObservableProvider[ChladniState]):
    """Scatters sand uniformly on the plate, then shakes it every frame."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        parameters: reactivex.Observable[ChladniParameters] | None = None,
        *,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._parameters = (
            parameters if parameters is not None else reactivex.just(ChladniParameters())
        )
        self._rng = rng if rng is not None else resolve_rng()

    def initial_state(self, parameters: ChladniParameters) -> ChladniState:
        n, m = chladni_modes(parameters.frequency)
        return ChladniState(
            particles=self._rng.random((parameters.particles, 2)), n=n, m=m
        )

    def next_state(self, state: ChladniState) -> ChladniState:
        shake_particles(state.particles, state.n, state.m, self._rng)
        return state

    def observable(self) -> reactivex.Observable[ChladniState]:
        def build_stream(
            parameters: ChladniParameters,
        ) -> reactivex.Observable[ChladniState]:
            seeded_state = self.initial_state(parameters)
            return self._scheduler.frames.pipe(
                ops.scan(lambda state, _: self.next_state(state), seed=seeded_state),
                ops.start_with(seeded_state),
            )

        return parameterized_stream(self._parameters, build_stream)


class WaveInterferenceStateProvider(ObservableProvider[WaveState]):
    def __init__(
        self,
        scheduler: FrameScheduler,
        parameters: reactivex.Observable[WaveParameters] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._parameters = (
            parameters if parameters is not None else reactivex.just(WaveParameters())
        )

    def observable(self) -> reactivex.Observable[WaveState]:
        def build_stream(parameters: WaveParameters) -> reactivex.Observable[WaveState]:
            sources = wave_sources(parameters.sources, parameters.width, parameters.height)

            def render(time: float) -> WaveState:
                return WaveState(
                    time=time,
                    field=interference_field(
                        parameters.width,
                        parameters.height,
                        sources,
                        parameters.frequency,
                        time,
                    ),
                )

            return self._scheduler.frames.pipe(
                ops.scan(
                    lambda time, _: time + WAVE_TIME_STEP * parameters.speed, seed=0.0
                ),
                ops.start_with(0.0),
                ops.map(render),
            )

        return parameterized_stream(self._parameters, build_stream)


class LifecycleFlowerStateProvider(ObservableProvider[LifecycleFrame]):
    """Plays the flower cycle in real time, scaled by ``speed``."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        parameters: reactivex.Observable[LifecycleParameters] | None = None,
        *,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._parameters = (
            parameters if parameters is not None else reactivex.just(LifecycleParameters())
        )
        self._rng = rng if rng is not None else resolve_rng()

    def observable(self) -> reactivex.Observable[LifecycleFrame]:
        def build_stream(
            parameters: LifecycleParameters,
        ) -> reactivex.Observable[LifecycleFrame]:
            noise = self._rng.random(NOISE_SAMPLES)
            return self._scheduler.frames.pipe(
                ops.scan(
                    lambda time, tick: time + tick.delta_ms * 0.001 * parameters.speed,
                    seed=0.0,
                ),
                ops.start_with(0.0),
                ops.map(
                    lambda time: lifecycle_frame(
                        time, noise, width=parameters.width, height=parameters.height
                    )
                ),
            )

        return parameterized_stream(self._parameters, build_stream)
