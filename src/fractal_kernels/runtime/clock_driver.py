from __future__ import annotations

from typing import Callable, Protocol

import pygame

from fractal_kernels.runtime.frame_scheduler import FrameScheduler
from fractal_kernels.utilities.env import Configuration
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)


class TickingClock(Protocol):
    def tick(self, framerate: int = 0) -> int: ...


class ClockFrameDriver:
    """Host loop that paces frames with a pygame clock and feeds the scheduler."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        clock: TickingClock | None = None,
        max_fps: int | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._clock = clock if clock is not None else pygame.time.Clock()
        self._max_fps = Configuration.max_fps() if max_fps is None else max_fps
        self._elapsed_ms = 0.0

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    def run(
        self,
        frames: int,
        should_continue: Callable[[], bool] | None = None,
    ) -> int:
        if frames < 0:
            raise ValueError("frames must be non-negative")

        completed = 0
        for _ in range(frames):
            if should_continue is not None and not should_continue():
                break
            self._elapsed_ms += self._clock.tick(self._max_fps)
            self._scheduler.tick(self._elapsed_ms)
            completed += 1
        logger.debug("Clock driver ran %s frame(s) over %.1f ms", completed, self._elapsed_ms)
        return completed
