from __future__ import annotations

import itertools
import math
from collections import deque
from typing import Iterable, Sequence

from fractal_kernels.kernels.circle_packing.descartes import (
    Circle, companion_circles, tangency_error)
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)

Triple = tuple[Circle, Circle, Circle]


def standard_configuration(
    center_x: float, center_y: float, radius: float
) -> tuple[Circle, list[Circle]]:
    """Enclosing circle, two halves side by side and the two circles above and below them."""

    if radius <= 0:
        raise ValueError("radius must be positive")
    outer = Circle.from_curvature(center_x, center_y, -1.0 / radius)
    half = radius / 2.0
    third = radius / 3.0
    inner = [
        Circle.from_curvature(center_x - half, center_y, 1.0 / half),
        Circle.from_curvature(center_x + half, center_y, 1.0 / half),
        Circle.from_curvature(center_x, center_y - (radius - third), 1.0 / third),
        Circle.from_curvature(center_x, center_y + (radius - third), 1.0 / third),
    ]
    return outer, inner


class _CircleIndex:
    """Bucketed lookup for approximate duplicates, ``tolerance`` wide per bucket."""

    def __init__(self, tolerance: float) -> None:
        self._tolerance = tolerance
        self._buckets: dict[tuple[int, int], list[Circle]] = {}

    def _key(self, x: float, y: float) -> tuple[int, int]:
        return (math.floor(x / self._tolerance), math.floor(y / self._tolerance))

    def add(self, circle: Circle) -> None:
        self._buckets.setdefault(self._key(circle.x, circle.y), []).append(circle)

    def contains(self, circle: Circle) -> bool:
        bx, by = self._key(circle.x, circle.y)
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                for other in self._buckets.get((bx + dx, by + dy), ()):
                    if (
                        abs(other.x - circle.x) < self._tolerance
                        and abs(other.y - circle.y) < self._tolerance
                        and abs(other.r - circle.r) < self._tolerance
                    ):
                        return True
        return False


class ApollonianPacker:
    """Fills an enclosing circle with tangent circles, one generation per depth level.

    Generations are processed breadth first, so every circle is found at the
    shallowest depth that produces it.
    """

    def __init__(
        self,
        enclosing: Circle,
        *,
        min_radius: float = 2.0,
        max_radius_factor: float = 2.0,
        containment_slack: float = 0.1,
        dedup_tolerance: float = 1.0,
    ) -> None:
        if enclosing.curvature >= 0:
            raise ValueError("enclosing circle must have negative curvature")
        if dedup_tolerance <= 0:
            raise ValueError("dedup_tolerance must be positive")
        self._enclosing = enclosing
        self._min_radius = min_radius
        self._max_radius = max_radius_factor * enclosing.r
        self._containment_slack = containment_slack
        self._dedup_tolerance = dedup_tolerance

    @property
    def enclosing(self) -> Circle:
        return self._enclosing

    def accepts(self, candidate: Circle) -> bool:
        if not (math.isfinite(candidate.r) and math.isfinite(candidate.curvature)):
            return False
        if candidate.curvature <= 0:
            return False
        if candidate.r < self._min_radius or candidate.r > self._max_radius:
            return False
        distance = math.hypot(
            candidate.x - self._enclosing.x, candidate.y - self._enclosing.y
        )
        return distance + candidate.r <= self._enclosing.r * (1.0 + self._containment_slack)

    def seed_triples(self, circles: Sequence[Circle]) -> list[Triple]:
        """Every mutually tangent triple among ``circles``."""

        def tangent(a: Circle, b: Circle) -> bool:
            return tangency_error(a, b) <= 1e-6 * max(a.r, b.r, 1.0)

        return [
            (a, b, c)
            for a, b, c in itertools.combinations(circles, 3)
            if tangent(a, b) and tangent(b, c) and tangent(a, c)
        ]

    def pack(
        self,
        inner: Iterable[Circle],
        depth: int,
        triples: Sequence[Triple] | None = None,
    ) -> list[Circle]:
        """Return the enclosing circle, ``inner`` and every accepted descendant."""

        if depth < 0:
            raise ValueError("depth must be non-negative")
        circles = [self._enclosing, *inner]
        index = _CircleIndex(self._dedup_tolerance)
        for circle in circles:
            index.add(circle)

        pending: deque[tuple[Triple, int]] = deque(
            (triple, 0)
            for triple in (triples if triples is not None else self.seed_triples(circles))
        )
        rejected = 0
        while pending:
            (c1, c2, c3), level = pending.popleft()
            if level >= depth:
                continue
            for candidate in companion_circles(c1, c2, c3):
                if not self.accepts(candidate) or index.contains(candidate):
                    rejected += 1
                    continue
                circles.append(candidate)
                index.add(candidate)
                pending.append(((c1, c2, candidate), level + 1))
                pending.append(((c1, c3, candidate), level + 1))
                pending.append(((c2, c3, candidate), level + 1))

        logger.debug(
            "Packed %s circles at depth %s (%s candidates rejected)",
            len(circles),
            depth,
            rejected,
        )
        return circles


def apollonian_gasket(
    width: float, height: float, depth: int, *, radius_fraction: float = 0.4
) -> list[Circle]:
    """Standard gasket centred in a ``width`` x ``height`` viewport."""

    radius = min(width, height) * radius_fraction
    outer, inner = standard_configuration(width / 2.0, height / 2.0, radius)
    return ApollonianPacker(outer).pack(inner, depth)
