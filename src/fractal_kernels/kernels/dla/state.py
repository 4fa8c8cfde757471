from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

SEED_HALF_WIDTH = 2
SPAWN_MARGIN = 20
ESCAPE_MARGIN = 50
EDGE_MARGIN = 10
STEPS_PER_SPEED = 50


@dataclass(frozen=True)
class DLAParameters:
    cols: int = 200
    rows: int = 200
    particle_speed: float = 2.0
    stickiness: float = 1.0
    walkers: int | None = None
    target_particles: int = 8000

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError("cols and rows must be positive")
        if not 0.0 <= self.stickiness <= 1.0:
            raise ValueError("stickiness must be within [0, 1]")

    @property
    def steps_per_frame(self) -> int:
        return max(int(self.particle_speed * STEPS_PER_SPEED), 0)

    @property
    def center(self) -> tuple[int, int]:
        return self.cols // 2, self.rows // 2

    @property
    def halt_radius(self) -> float:
        return min(self.cols, self.rows) / 2 - EDGE_MARGIN


@dataclass(frozen=True)
class StuckCell:
    x: int
    y: int
    distance: float


@dataclass
class Walker:
    x: int
    y: int


@dataclass
class DLAState:
    """Occupancy grid indexed ``[row, col]`` plus the live walker batch."""

    grid: np.ndarray
    walkers: list[Walker] = field(default_factory=list)
    particle_count: int = 0
    max_radius: float = 0.0
    halted: bool = False
    latest: list[StuckCell] = field(default_factory=list, repr=False)

    @property
    def occupied(self) -> int:
        return int(np.count_nonzero(self.grid))
