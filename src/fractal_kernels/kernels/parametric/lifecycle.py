"""Growth, bloom and decay of a single flower over a repeating cycle.

Time is measured in seconds of animation time. One cycle lasts
``CYCLE_SECONDS`` and its position ``t`` in ``[0, 1)`` drives sigmoid stem and
bloom growth, then decay and chaotic jitter once ``t`` passes
``DECAY_START``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

CYCLE_SECONDS = 10.0
STEM_RATE, STEM_MIDPOINT = 15.0, 0.25
BLOOM_RATE, BLOOM_MIDPOINT = 20.0, 0.4
# Bloom waits for the stem so the flower never opens on the ground.
BLOOM_MIN_STEM = 0.2
DECAY_START = 0.75
DECAY_RATE = 3.0
CHAOS_RATE = 30.0

NOISE_SAMPLES = 100
STEM_STEPS = 50
MAX_SEEDS = 100
SEED_SPREAD = 4.0
SEED_GOLDEN_ANGLE = math.radians(137.508)
MIN_VISIBLE_DECAY = 0.1
PETAL_SIZE = 120.0
PETAL_LOBES = 4
PETAL_STEP = 0.05
PETAL_NOISE = 0.05


@dataclass(frozen=True)
class LifecyclePhase:
    t: float
    stem: float
    bloom: float
    decay: float
    chaos: float

    @property
    def seed_count(self) -> float:
        return MAX_SEEDS * self.bloom * self.decay

    @property
    def petal_size(self) -> float:
        return PETAL_SIZE * self.bloom * self.decay


@dataclass(frozen=True)
class LifecycleFrame:
    phase: LifecyclePhase
    stem: np.ndarray
    tip: tuple[float, float]
    petals: np.ndarray
    seeds: np.ndarray
    seed_radius: float


def _sigmoid(x: float) -> float:
    return 1.0 / (1.0 + math.exp(-x))


def cycle_position(time_s: float) -> float:
    return (time_s % CYCLE_SECONDS) / CYCLE_SECONDS


def lifecycle_phase(t: float) -> LifecyclePhase:
    """Growth factors at cycle position ``t``, clamped into ``[0, 1]``."""

    t = min(max(t, 0.0), 1.0)
    stem = _sigmoid(STEM_RATE * (t - STEM_MIDPOINT))
    bloom = _sigmoid(BLOOM_RATE * (t - BLOOM_MIDPOINT)) if stem >= BLOOM_MIN_STEM else 0.0
    if t > DECAY_START:
        decay = max(0.0, 1.0 - (t - DECAY_START) * DECAY_RATE)
        chaos = (t - DECAY_START) * CHAOS_RATE
    else:
        decay = 1.0
        chaos = 0.0
    return LifecyclePhase(t=t, stem=stem, bloom=bloom, decay=decay, chaos=chaos)


def _stem_x(height_ratio: float, phase: LifecyclePhase, time_s: float, cx: float) -> float:
    bend = height_ratio**2 * phase.chaos * 2 if phase.t > DECAY_START else 0.0
    sway = math.sin(time_s * 2 + height_ratio * 3) * 2
    return cx + math.sin(height_ratio * math.pi) * 10 + bend + sway


def lifecycle_frame(
    time_s: float,
    noise: np.ndarray,
    *,
    width: float = 400.0,
    height: float = 400.0,
) -> LifecycleFrame:
    """Stem polyline, petal outline and seed head at ``time_s`` seconds.

    ``noise`` holds ``NOISE_SAMPLES`` values in ``[0, 1)`` that perturb the
    petals and seeds while the flower withers.
    """

    if len(noise) != NOISE_SAMPLES:
        raise ValueError(f"noise must hold {NOISE_SAMPLES} samples")

    phase = lifecycle_phase(cycle_position(time_s))
    cx = width / 2
    cy = height / 2 + 100
    stem_height = (height - (cy - 150)) * phase.stem

    stem = np.array(
        [
            (
                _stem_x(i / STEM_STEPS * phase.stem, phase, time_s, cx),
                height - stem_height * i / STEM_STEPS,
            )
            for i in range(STEM_STEPS + 1)
        ]
    )
    tip_x, tip_y = (float(v) for v in stem[-1])

    petals = np.empty((0, 2))
    seeds = np.empty((0, 2))
    if phase.seed_count > 1:
        if phase.petal_size > 1:
            theta = np.arange(0.0, 2 * math.pi, PETAL_STEP)
            r = np.abs(np.cos(PETAL_LOBES * theta)) * phase.petal_size
            indices = np.floor(theta / (2 * math.pi) * NOISE_SAMPLES).astype(int) % NOISE_SAMPLES
            r = r * (1 - phase.chaos * PETAL_NOISE * noise[indices])
            petals = np.column_stack((tip_x + r * np.cos(theta), tip_y + r * np.sin(theta)))

        if phase.decay > MIN_VISIBLE_DECAY:
            i = np.arange(math.ceil(phase.seed_count))
            r = SEED_SPREAD * phase.bloom * np.sqrt(i)
            theta = i * SEED_GOLDEN_ANGLE
            jitter_x = (noise[i % NOISE_SAMPLES] - 0.5) * phase.chaos
            jitter_y = (noise[(i + NOISE_SAMPLES // 2) % NOISE_SAMPLES] - 0.5) * phase.chaos
            seeds = np.column_stack(
                (tip_x + r * np.cos(theta) + jitter_x, tip_y + r * np.sin(theta) + jitter_y)
            )

    return LifecycleFrame(
        phase=phase,
        stem=stem,
        tip=(tip_x, tip_y),
        petals=petals,
        seeds=seeds,
        seed_radius=1.5 * phase.decay,
    )
