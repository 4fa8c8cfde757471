from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

DIFFUSION_A = 1.0
DIFFUSION_B = 0.5
DEFAULT_FEED = 0.055
DEFAULT_KILL = 0.062
FEED_RANGE = (0.01, 0.1)
KILL_RANGE = (0.03, 0.07)

SEED_BLOCK = 40
SEED_DENSITY = 0.5
SEED_PATCHES = 5
PATCH_HALF_WIDTH = 5


@dataclass(frozen=True)
class GrayScottParameters:
    width: int = 200
    height: int = 200
    feed: float = DEFAULT_FEED
    kill: float = DEFAULT_KILL
    substeps: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")


@dataclass
class GrayScottState:
    """Concentrations ``a`` and ``b`` with scratch buffers for the next step."""

    a: np.ndarray
    b: np.ndarray
    next_a: np.ndarray = field(repr=False, compare=False, default=None)
    next_b: np.ndarray = field(repr=False, compare=False, default=None)
    steps: int = 0

    def __post_init__(self) -> None:
        if self.a.shape != self.b.shape:
            raise ValueError("a and b must share a shape")
        if self.next_a is None:
            self.next_a = np.empty_like(self.a)
        if self.next_b is None:
            self.next_b = np.empty_like(self.b)

    @classmethod
    def seeded(
        cls, width: int, height: int, rng: np.random.Generator
    ) -> "GrayScottState":
        a = np.ones((height, width), dtype=np.float64)
        b = np.zeros((height, width), dtype=np.float64)

        cy, cx = height // 2, width // 2
        half = SEED_BLOCK // 2
        rows = slice(max(cy - half, 0), min(cy + half, height))
        cols = slice(max(cx - half, 0), min(cx + half, width))
        block = b[rows, cols]
        block[rng.random(block.shape) < SEED_DENSITY] = 1.0

        for _ in range(SEED_PATCHES):
            px = int(rng.integers(0, width))
            py = int(rng.integers(0, height))
            b[
                max(py - PATCH_HALF_WIDTH, 0) : py + PATCH_HALF_WIDTH + 1,
                max(px - PATCH_HALF_WIDTH, 0) : px + PATCH_HALF_WIDTH + 1,
            ] = 1.0
        return cls(a=a, b=b)

    def swap(self) -> None:
        self.a, self.next_a = self.next_a, self.a
        self.b, self.next_b = self.next_b, self.b

    def display(self) -> np.ndarray:
        return np.clip(self.a - self.b, 0.0, 1.0)
