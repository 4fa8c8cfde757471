"""Wind-blown leaf particles released from an L-system plant."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace

SPAWN_CHANCE_PER_FRAME = 0.2
WIND_STRENGTH = 0.15
GRAVITY = 0.05
GUST_JITTER = 0.05
LIFE_DECAY = 0.005
SPIN = 0.1
CULL_MARGIN = 50.0


@dataclass(frozen=True)
class LeafParticle:
    x: float
    y: float
    vx: float
    vy: float
    life: float = 1.0
    rotation: float = 0.0


def wind_force(angle_deg: float) -> tuple[float, float]:
    wind_angle = math.radians(angle_deg - 90.0)
    return (
        math.cos(wind_angle) * WIND_STRENGTH,
        math.sin(wind_angle) * WIND_STRENGTH + GRAVITY,
    )


def spawn_leaf(
    spawns: tuple[tuple[float, float], ...], rng: random.Random
) -> LeafParticle | None:
    if not spawns or rng.random() >= SPAWN_CHANCE_PER_FRAME:
        return None
    x, y = spawns[rng.randrange(len(spawns))]
    return LeafParticle(
        x=x,
        y=y,
        vx=(rng.random() - 0.2) * 2,
        vy=(rng.random() - 0.5) * 2,
        rotation=rng.random() * math.pi,
    )


def step_leaves(
    leaves: tuple[LeafParticle, ...],
    *,
    angle_deg: float,
    width: float,
    height: float,
    rng: random.Random,
) -> tuple[LeafParticle, ...]:
    """Advance every leaf one frame and drop the dead or off-screen ones."""

    force_x, force_y = wind_force(angle_deg)
    survivors = []
    for leaf in leaves:
        vx = leaf.vx + force_x + (rng.random() - 0.5) * GUST_JITTER
        vy = leaf.vy + force_y
        moved = replace(
            leaf,
            x=leaf.x + vx,
            y=leaf.y + vy,
            vx=vx,
            vy=vy,
            life=leaf.life - LIFE_DECAY,
            rotation=leaf.rotation + SPIN,
        )
        if (
            moved.life > 0
            and -CULL_MARGIN < moved.x < width + CULL_MARGIN
            and moved.y < height + CULL_MARGIN
        ):
            survivors.append(moved)
    return tuple(survivors)
