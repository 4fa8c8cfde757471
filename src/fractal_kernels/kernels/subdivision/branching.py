"""Three-dimensional binary branching tree (the bronchial tree)."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fractal_kernels.kernels.subdivision.primitives import Vec3

ROOT_LENGTH = 120.0
ROOT_WIDTH = 12.0
LENGTH_RATIO = 0.7
WIDTH_RATIO = 0.7
SPREAD = 0.5
BREATH_AMPLITUDE = 0.1
BREATH_RATE = 2.0


@dataclass(frozen=True)
class Branch:
    start: Vec3
    end: Vec3
    width: float
    level: int


def breathing_scale(time_s: float, breathing: bool = True) -> float:
    if not breathing:
        return 1.0
    return 1.0 + math.sin(time_s * BREATH_RATE) * BREATH_AMPLITUDE


def bronchial_tree(depth: int, scale: float = 1.0) -> list[Branch]:
    """Every branch of a tree whose levels run from 0 to ``depth`` inclusive."""

    if depth < 0:
        raise ValueError("depth must be non-negative")

    branches: list[Branch] = []
    # (start, length, angle_x, angle_z, width, level)
    stack = [((0.0, 0.0, 0.0), ROOT_LENGTH, 0.0, 0.0, ROOT_WIDTH, 0)]
    while stack:
        start, length, angle_x, angle_z, width, level = stack.pop()
        x, y, z = start
        reach = length * scale
        end = (
            x + math.sin(angle_z) * math.cos(angle_x) * reach,
            y + math.cos(angle_z) * reach,
            z + math.sin(angle_z) * math.sin(angle_x) * reach,
        )
        branches.append(Branch(start=start, end=end, width=width, level=level))
        if level < depth:
            for sign in (-1.0, 1.0):
                stack.append(
                    (
                        end,
                        length * LENGTH_RATIO,
                        angle_x + sign * SPREAD,
                        angle_z + sign * SPREAD,
                        width * WIDTH_RATIO,
                        level + 1,
                    )
                )
    return branches
