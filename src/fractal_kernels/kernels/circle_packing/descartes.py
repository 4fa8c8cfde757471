"""Real and complex forms of the Descartes circle theorem.

Curvatures are signed: a circle that encloses the others has negative
curvature, and its signed radius ``1 / k`` is negative too.
"""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass

MIN_CURVATURE = 1e-4
TANGENCY_TOLERANCE = 1e-6


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    r: float
    curvature: float

    @classmethod
    def from_curvature(cls, x: float, y: float, curvature: float) -> "Circle":
        return cls(x=x, y=y, r=abs(1.0 / curvature), curvature=curvature)

    @property
    def center(self) -> complex:
        return complex(self.x, self.y)

    @property
    def signed_radius(self) -> float:
        return 1.0 / self.curvature


def descartes_curvatures(k1: float, k2: float, k3: float) -> tuple[float, float]:
    """Both curvatures completing a Descartes quadruple, larger first."""

    total = k1 + k2 + k3
    # Tangent triples have a non-negative discriminant; negatives are rounding.
    discriminant = max(k1 * k2 + k2 * k3 + k3 * k1, 0.0)
    root = 2.0 * math.sqrt(discriminant)
    return total + root, total - root


def descartes_centers(
    c1: Circle, c2: Circle, c3: Circle, k4: float
) -> tuple[complex, complex] | None:
    """Both centre candidates for a fourth circle of curvature ``k4``."""

    if not math.isfinite(k4) or abs(k4) < MIN_CURVATURE:
        return None
    k1, k2, k3 = c1.curvature, c2.curvature, c3.curvature
    z1, z2, z3 = c1.center, c2.center, c3.center
    weighted = k1 * z1 + k2 * z2 + k3 * z3
    root = 2.0 * cmath.sqrt(k1 * k2 * z1 * z2 + k2 * k3 * z2 * z3 + k3 * k1 * z3 * z1)
    return (weighted + root) / k4, (weighted - root) / k4


def tangency_error(a: Circle, b: Circle) -> float:
    """Distance between centres minus the tangent distance implied by the signed radii."""

    distance = abs(a.center - b.center)
    return abs(distance - abs(a.signed_radius + b.signed_radius))


def companion_circles(c1: Circle, c2: Circle, c3: Circle) -> list[Circle]:
    """Circles tangent to all of ``c1``, ``c2`` and ``c3``.

    Each curvature root is paired with whichever centre candidate is actually
    tangent to the triple; equal roots can yield two distinct circles.
    """

    found: list[Circle] = []
    for k4 in descartes_curvatures(c1.curvature, c2.curvature, c3.curvature):
        centers = descartes_centers(c1, c2, c3, k4)
        if centers is None:
            continue
        for center in centers:
            if not (math.isfinite(center.real) and math.isfinite(center.imag)):
                continue
            candidate = Circle.from_curvature(center.real, center.imag, k4)
            scale = max(abs(c.signed_radius) for c in (c1, c2, c3, candidate))
            tolerance = TANGENCY_TOLERANCE * max(scale, 1.0)
            if all(tangency_error(candidate, c) <= tolerance for c in (c1, c2, c3)):
                if not any(_same_circle(candidate, other, tolerance) for other in found):
                    found.append(candidate)
    return found


def _same_circle(a: Circle, b: Circle, tolerance: float) -> bool:
    return (
        abs(a.x - b.x) <= tolerance
        and abs(a.y - b.y) <= tolerance
        and abs(a.curvature - b.curvature) <= tolerance * max(abs(a.curvature), 1.0)
    )
