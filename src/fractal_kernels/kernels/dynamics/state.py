from __future__ import annotations

from dataclasses import dataclass, field

from fractal_kernels.kernels.dynamics.lorenz import LORENZ_START, Vector3
from fractal_kernels.kernels.dynamics.pendulum import PendulumState
from fractal_kernels.kernels.dynamics.trail import TrailBuffer

DEFAULT_PENDULUM_TRAIL = 500


@dataclass(frozen=True)
class LorenzParameters:
    speed: float = 1.0
    substeps: int = 5
    capacity: int | None = None


@dataclass(frozen=True)
class PendulumParameters:
    gravity: float = 1.0
    trail_length: int = DEFAULT_PENDULUM_TRAIL
    width: float = 400.0
    height: float = 400.0

    @property
    def pivot(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 3)


@dataclass
class LorenzRunState:
    point: Vector3 = LORENZ_START
    trail: TrailBuffer[Vector3] = field(default_factory=lambda: TrailBuffer(2000))
    steps: int = 0


@dataclass
class PendulumRunState:
    pendulum: PendulumState = field(default_factory=PendulumState)
    trail: TrailBuffer[tuple[float, float]] = field(
        default_factory=lambda: TrailBuffer(DEFAULT_PENDULUM_TRAIL)
    )
    frames: int = 0
