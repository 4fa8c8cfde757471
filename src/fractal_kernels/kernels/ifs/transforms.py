"""Affine maps and probability-weighted selection for the chaos game."""

from __future__ import annotations

import bisect
import itertools
import math
import random
from dataclasses import dataclass
from typing import Sequence

PROBABILITY_TOLERANCE = 1e-6

Point = tuple[float, float]


@dataclass(frozen=True)
class AffineMap:
    """``(x, y) -> (a*x + b*y + e, c*x + d*y + f)`` chosen with ``probability``."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float
    probability: float

    def apply(self, point: Point) -> Point:
        x, y = point
        return (
            self.a * x + self.b * y + self.e,
            self.c * x + self.d * y + self.f,
        )


class IteratedFunctionSystem:
    def __init__(self, maps: Sequence[AffineMap]) -> None:
        if not maps:
            raise ValueError("An iterated function system needs at least one map")
        if any(m.probability < 0 for m in maps):
            raise ValueError("Map probabilities must be non-negative")
        total = math.fsum(m.probability for m in maps)
        if abs(total - 1.0) > PROBABILITY_TOLERANCE:
            raise ValueError(f"Map probabilities must sum to 1, got {total}")

        self._maps = tuple(maps)
        self._thresholds = list(itertools.accumulate(m.probability for m in maps))

    @property
    def maps(self) -> tuple[AffineMap, ...]:
        return self._maps

    def select(self, draw: float) -> AffineMap:
        """Pick the map whose cumulative-probability band contains ``draw``."""

        index = bisect.bisect_right(self._thresholds, draw)
        return self._maps[min(index, len(self._maps) - 1)]

    def step(self, point: Point, rng: random.Random) -> Point:
        return self.select(rng.random()).apply(point)

    def sample(
        self, point: Point, count: int, rng: random.Random
    ) -> tuple[list[Point], Point]:
        """Run ``count`` chaos-game steps; returns the visited points and the last one."""

        visited = []
        for _ in range(count):
            point = self.step(point, rng)
            visited.append(point)
        return visited, point


BARNSLEY_FERN = IteratedFunctionSystem(
    [
        AffineMap(0.0, 0.0, 0.0, 0.16, 0.0, 0.0, probability=0.01),
        AffineMap(0.85, 0.04, -0.04, 0.85, 0.0, 1.6, probability=0.85),
        AffineMap(0.2, -0.26, 0.23, 0.22, 0.0, 1.6, probability=0.07),
        AffineMap(-0.15, 0.28, 0.26, 0.24, 0.0, 0.44, probability=0.07),
    ]
)

SIERPINSKI_GASKET = IteratedFunctionSystem(
    [
        AffineMap(0.5, 0.0, 0.0, 0.5, 0.0, 0.0, probability=1 / 3),
        AffineMap(0.5, 0.0, 0.0, 0.5, 0.5, 0.0, probability=1 / 3),
        AffineMap(0.5, 0.0, 0.0, 0.5, 0.25, math.sqrt(3) / 4, probability=1 / 3),
    ]
)
