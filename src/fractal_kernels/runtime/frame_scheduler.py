"""Per-refresh driver for the time-stepped kernels.

The host calls :meth:`FrameScheduler.tick` once per display refresh with a
monotonically increasing timestamp. Every attached step function receives the
elapsed milliseconds since the previous tick it observed; the first call after
attaching always receives ``0.0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import reactivex
from reactivex import operators as ops
from reactivex.abc import DisposableBase
from reactivex.subject import Subject

from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)

StepFn = Callable[[float], None]


@dataclass(frozen=True)
class FrameTick:
    timestamp_ms: float
    delta_ms: float
    index: int


def _advance_tick(previous: FrameTick | None, timestamp_ms: float) -> FrameTick:
    if previous is None:
        return FrameTick(timestamp_ms=timestamp_ms, delta_ms=0.0, index=0)
    return FrameTick(
        timestamp_ms=timestamp_ms,
        delta_ms=max(timestamp_ms - previous.timestamp_ms, 0.0),
        index=previous.index + 1,
    )


class FrameHandle:
    def __init__(self, name: str) -> None:
        self.name = name
        self._active = True
        self._subscription: DisposableBase | None = None

    @property
    def active(self) -> bool:
        return self._active

    def _bind(self, subscription: DisposableBase) -> None:
        self._subscription = subscription

    def _cancel(self) -> bool:
        if not self._active:
            return False
        self._active = False
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        return True


class FrameScheduler:
    def __init__(self) -> None:
        self._timestamps: Subject[float] = Subject()
        self._handles: list[FrameHandle] = []
        self._clock_ms = 0.0

    @property
    def frames(self) -> reactivex.Observable[FrameTick]:
        """Stream of ticks; each subscriber gets its own delta bookkeeping."""

        return self._timestamps.pipe(
            ops.scan(_advance_tick, seed=None),
        )

    @property
    def active_handles(self) -> tuple[FrameHandle, ...]:
        return tuple(self._handles)

    def start(self, step_fn: StepFn, *, name: str | None = None) -> FrameHandle:
        handle = FrameHandle(name or getattr(step_fn, "__name__", "step"))

        def on_tick(tick: FrameTick) -> None:
            # A handle stopped mid-dispatch must not observe the current tick.
            if handle.active:
                step_fn(tick.delta_ms)

        handle._bind(self.frames.subscribe(on_next=on_tick))
        self._handles.append(handle)
        logger.info("Attached step function '%s'", handle.name)
        return handle

    def stop(self, handle: FrameHandle) -> None:
        if handle._cancel():
            self._handles.remove(handle)
            logger.info("Detached step function '%s'", handle.name)

    def stop_all(self) -> None:
        for handle in list(self._handles):
            self.stop(handle)

    def tick(self, timestamp_ms: float) -> None:
        self._clock_ms = float(timestamp_ms)
        self._timestamps.on_next(self._clock_ms)

    def advance(self, delta_ms: float) -> None:
        """Tick at the last timestamp plus ``delta_ms``; handy for headless runs."""

        self.tick(self._clock_ms + delta_ms)
