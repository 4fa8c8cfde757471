from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PendulumState:
    a1: float = math.pi / 2
    a2: float = math.pi / 2
    a1_v: float = 0.0
    a2_v: float = 0.0


@dataclass(frozen=True)
class BobPositions:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class DoublePendulum:
    """Two point masses on rigid rods, stepped once per frame with unit time.

    Velocities are damped by ``damping`` after every step so that the
    integration error does not pump energy into the system.
    """

    m1: float = 10.0
    m2: float = 10.0
    l1: float = 100.0
    l2: float = 100.0
    gravity: float = 1.0
    damping: float = 0.9999

    @property
    def g(self) -> float:
        return self.gravity * 0.5

    def accelerations(self, state: PendulumState) -> tuple[float, float]:
        m1, m2, l1, l2, g = self.m1, self.m2, self.l1, self.l2, self.g
        a1, a2, v1, v2 = state.a1, state.a2, state.a1_v, state.a2_v
        delta = a1 - a2
        den = 2 * m1 + m2 - m2 * math.cos(2 * a1 - 2 * a2)

        a1_a = (
            -g * (2 * m1 + m2) * math.sin(a1)
            - m2 * g * math.sin(a1 - 2 * a2)
            - 2 * math.sin(delta) * m2 * (v2 * v2 * l2 + v1 * v1 * l1 * math.cos(delta))
        ) / (l1 * den)
        a2_a = (
            2
            * math.sin(delta)
            * (
                v1 * v1 * l1 * (m1 + m2)
                + g * (m1 + m2) * math.cos(a1)
                + v2 * v2 * l2 * m2 * math.cos(delta)
            )
        ) / (l2 * den)
        return a1_a, a2_a

    def step(self, state: PendulumState) -> PendulumState:
        a1_a, a2_a = self.accelerations(state)
        a1_v = state.a1_v + a1_a
        a2_v = state.a2_v + a2_a
        return PendulumState(
            a1=state.a1 + a1_v,
            a2=state.a2 + a2_v,
            a1_v=a1_v * self.damping,
            a2_v=a2_v * self.damping,
        )

    def positions(
        self, state: PendulumState, pivot: tuple[float, float] = (0.0, 0.0)
    ) -> BobPositions:
        px, py = pivot
        x1 = px + self.l1 * math.sin(state.a1)
        y1 = py + self.l1 * math.cos(state.a1)
        return BobPositions(
            x1=x1,
            y1=y1,
            x2=x1 + self.l2 * math.sin(state.a2),
            y2=y1 + self.l2 * math.cos(state.a2),
        )
