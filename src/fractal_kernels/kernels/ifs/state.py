from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChaosGameParameters:
    density: float = 1.0
    capacity: int | None = None

    @property
    def points_per_frame(self) -> int:
        return max(int(50 * self.density), 0)


@dataclass
class ChaosGameState:
    point: tuple[float, float] = (0.0, 0.0)
    samples: deque[tuple[float, float]] = field(default_factory=deque)
    generated: int = 0
    latest: list[tuple[float, float]] = field(default_factory=list, repr=False)

    @classmethod
    def empty(cls, capacity: int | None = None) -> "ChaosGameState":
        return cls(samples=deque(maxlen=capacity))
