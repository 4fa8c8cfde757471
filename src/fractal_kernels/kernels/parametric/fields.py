from __future__ import annotations

import math

import numpy as np

SHAKE_AMPLITUDE = 0.01
WAVE_TIME_STEP = 0.05


def chladni_modes(frequency: float) -> tuple[int, int]:
    return 1 + math.floor(frequency / 100), 2 + math.floor(frequency / 150)


def chladni_value(x, y, n: int, m: int):
    """Plate displacement; zero along the nodal lines where sand collects."""

    return np.cos(n * np.pi * x) * np.cos(m * np.pi * y) - np.cos(
        m * np.pi * x
    ) * np.cos(n * np.pi * y)


def shake_particles(
    particles: np.ndarray, n: int, m: int, rng: np.random.Generator
) -> np.ndarray:
    """Jitter ``(N, 2)`` unit-square particles in place, harder where the plate moves more."""

    x, y = particles[:, 0], particles[:, 1]
    shake = np.abs(chladni_value(x, y, n, m)) * SHAKE_AMPLITUDE
    particles += (rng.random(particles.shape) - 0.5) * shake[:, None]
    # Leaving one edge re-enters at the opposite one.
    particles[particles < 0.0] = 1.0
    particles[particles > 1.0] = 0.0
    return particles


def wave_sources(count: int, width: int, height: int) -> np.ndarray:
    if count < 1:
        raise ValueError("count must be at least 1")
    angles = np.arange(count, dtype=np.float64) / count * 2.0 * math.pi
    radius = min(width, height) * 0.3
    return np.column_stack(
        (width / 2 + np.cos(angles) * radius, height / 2 + np.sin(angles) * radius)
    )


def interference_field(
    width: int,
    height: int,
    sources: np.ndarray,
    frequency: float,
    time: float,
) -> np.ndarray:
    """Mean of decaying circular waves, rescaled to ``[0, 1]``."""

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    reach = max(width, height) * 0.7
    amplitude = np.zeros((height, width), dtype=np.float64)
    for sx, sy in sources:
        distance = np.hypot(xs - sx, ys - sy)
        decay = np.maximum(0.0, 1.0 - distance / reach)
        amplitude += np.sin(distance * frequency - time) * decay
    return (amplitude / len(sources) + 1.0) / 2.0
