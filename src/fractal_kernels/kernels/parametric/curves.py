"""Closed-form plane curves and point layouts.

Every generator returns an ``(N, 2)`` float array in model units centred on
the origin; fitting to a viewport is left to the caller.
"""

from __future__ import annotations

import math

import numpy as np

GOLDEN_ANGLE_DEG = 137.5
FLOWER_RADIUS = 30.0


def phyllotaxis(count: int = 1500, spacing: float = 4.0) -> np.ndarray:
    """Vogel's sunflower model: seed ``n`` at radius ``spacing * sqrt(n)``."""

    if count < 0:
        raise ValueError("count must be non-negative")
    n = np.arange(count, dtype=np.float64)
    r = spacing * np.sqrt(n)
    theta = n * math.radians(GOLDEN_ANGLE_DEG)
    return np.column_stack((r * np.cos(theta), r * np.sin(theta)))


def rose_curve(n: float, scale: float = 1.0, samples: int = 361) -> np.ndarray:
    k = np.radians(np.arange(samples, dtype=np.float64))
    r = np.sin(n * k) * scale
    return np.column_stack((r * np.cos(k), r * np.sin(k)))


def maurer_rose(n: float, d: float, scale: float = 1.0, samples: int = 361) -> np.ndarray:
    """Polyline joining points of the rose ``r = sin(n k)`` at every ``d`` degrees."""

    k = np.radians(np.arange(samples, dtype=np.float64) * d)
    r = np.sin(n * k) * scale
    return np.column_stack((r * np.cos(k), r * np.sin(k)))


def superformula(
    m: float,
    n1: float,
    n2: float,
    n3: float,
    *,
    a: float = 1.0,
    b: float = 1.0,
    scale: float = 1.0,
    samples: int = 721,
) -> np.ndarray:
    """Gielis superformula over two full turns, dropping non-finite radii."""

    phi = np.arange(samples, dtype=np.float64) / 360.0 * 2.0 * math.pi
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        part1 = np.abs(np.cos(m * phi / 4.0) / a) ** n2
        part2 = np.abs(np.sin(m * phi / 4.0) / b) ** n3
        r = (part1 + part2) ** (np.float64(-1.0) / n1)
    finite = np.isfinite(r)
    r, phi = r[finite] * scale, phi[finite]
    return np.column_stack((r * np.cos(phi), r * np.sin(phi)))


def flower_of_life(layers: int, radius: float = FLOWER_RADIUS) -> np.ndarray:
    """Centres of the overlapping circles, ring by ring on a hexagonal lattice.

    Ring ``k`` holds the six hexagon corners at distance ``k * radius`` plus
    ``k - 1`` points spaced along each hexagon edge.
    """

    if layers < 0:
        raise ValueError("layers must be non-negative")
    centres = [(0.0, 0.0)]
    for ring in range(1, layers + 1):
        for i in range(6):
            angle = math.radians(i * 60)
            next_angle = math.radians((i + 1) * 60)
            start = (math.cos(angle) * radius * ring, math.sin(angle) * radius * ring)
            end = (
                math.cos(next_angle) * radius * ring,
                math.sin(next_angle) * radius * ring,
            )
            centres.append(start)
            for j in range(1, ring):
                ratio = j / ring
                centres.append(
                    (
                        start[0] + (end[0] - start[0]) * ratio,
                        start[1] + (end[1] - start[1]) * ratio,
                    )
                )
    return np.array(centres, dtype=np.float64)
