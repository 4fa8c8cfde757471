from __future__ import annotations

from typing import Sequence, TypeVar

import reactivex
from reactivex import operators as ops

from fractal_kernels.kernels.providers import ObservableProvider
from fractal_kernels.kernels.subdivision.branching import (Branch,
                                                           breathing_scale,
                                                           bronchial_tree)
from fractal_kernels.kernels.subdivision.state import (SpinningGeometry,
                                                       SpinState)
from fractal_kernels.runtime.frame_scheduler import FrameScheduler, FrameTick

T = TypeVar("T")

# Per-frame rotation increments used by the 3-D views.
TETRAHEDRON_SPIN = (0.0, 0.01)
MENGER_SPIN = (0.003, 0.008)
BRONCHIAL_SPIN = (0.0, 0.005)


def _advance_spin(
    state: SpinState, tick: FrameTick, *, rate_x: float, rate_y: float
) -> SpinState:
    return SpinState(
        angle_x=state.angle_x + rate_x,
        angle_y=state.angle_y + rate_y,
        time_s=state.time_s + tick.delta_ms * 0.001,
    )


class SpinStateProvider(ObservableProvider[SpinState]):
    """Rotation angles and elapsed time for the rotating 3-D subdivisions."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        rates: tuple[float, float] = MENGER_SPIN,
        initial_state: SpinState | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._rate_x, self._rate_y = rates
        self._initial_state = initial_state or SpinState()

    def observable(self) -> reactivex.Observable[SpinState]:
        return self._scheduler.frames.pipe(
            ops.scan(
                lambda state, tick: _advance_spin(
                    state, tick, rate_x=self._rate_x, rate_y=self._rate_y
                ),
                seed=self._initial_state,
            ),
            ops.start_with(self._initial_state),
            ops.share(),
        )


class SpinningGeometryProvider(ObservableProvider[SpinningGeometry[T]]):
    """Pairs a fixed set of leaf primitives with a spinning view."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        items: Sequence[T],
        rates: tuple[float, float],
    ) -> None:
        self._items = tuple(items)
        self._spin = SpinStateProvider(scheduler, rates)

    def observable(self) -> reactivex.Observable[SpinningGeometry[T]]:
        return self._spin.observable().pipe(
            ops.map(lambda spin: SpinningGeometry(spin=spin, items=self._items)),
            ops.share(),
        )


class BronchialTreeStateProvider(ObservableProvider[SpinningGeometry[Branch]]):
    """Regrows the branching tree every frame at the current breathing scale."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        depth: int = 7,
        *,
        breathing: bool = True,
        rates: tuple[float, float] = BRONCHIAL_SPIN,
    ) -> None:
        if depth < 0:
            raise ValueError("depth must be non-negative")
        self._depth = depth
        self._breathing = breathing
        self._spin = SpinStateProvider(scheduler, rates)

    def frame(self, spin: SpinState) -> SpinningGeometry[Branch]:
        scale = breathing_scale(spin.time_s, self._breathing)
        return SpinningGeometry(
            spin=spin, items=bronchial_tree(self._depth, scale), scale=scale
        )

    def observable(self) -> reactivex.Observable[SpinningGeometry[Branch]]:
        return self._spin.observable().pipe(ops.map(self.frame), ops.share())
