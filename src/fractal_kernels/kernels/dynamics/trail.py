from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class TrailBuffer(Generic[T]):
    """Most recent ``capacity`` positions; the oldest is evicted first."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._points: deque[T] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._points.maxlen or 0

    def append(self, point: T) -> None:
        self._points.append(point)

    def extend(self, points) -> None:
        self._points.extend(points)

    def clear(self) -> None:
        self._points.clear()

    def latest(self) -> T | None:
        return self._points[-1] if self._points else None

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[T]:
        return iter(self._points)
