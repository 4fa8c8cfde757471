from __future__ import annotations

import numpy as np
from scipy.ndimage import convolve

from fractal_kernels.kernels.reaction_diffusion.state import (DIFFUSION_A,
                                                              DIFFUSION_B,
                                                              GrayScottState)
from fractal_kernels.utilities.env import Configuration, LaplacianStrategy

LAPLACIAN_KERNEL = np.array(
    [[0.05, 0.2, 0.05], [0.2, -1.0, 0.2], [0.05, 0.2, 0.05]], dtype=np.float64
)


def laplacian_convolve(field: np.ndarray) -> np.ndarray:
    return convolve(field, LAPLACIAN_KERNEL, mode="wrap")


def laplacian_roll(field: np.ndarray) -> np.ndarray:
    up = np.roll(field, 1, axis=0)
    down = np.roll(field, -1, axis=0)
    direct = up + down + np.roll(field, 1, axis=1) + np.roll(field, -1, axis=1)
    diagonal = (
        np.roll(up, 1, axis=1)
        + np.roll(up, -1, axis=1)
        + np.roll(down, 1, axis=1)
        + np.roll(down, -1, axis=1)
    )
    return 0.2 * direct + 0.05 * diagonal - field


class GrayScottStepper:
    """Explicit Gray-Scott update on a toroidal grid.

    Each step writes clipped values into the scratch buffers and then swaps
    them in, so an observer never sees a half-updated field.
    """

    def __init__(
        self,
        feed: float,
        kill: float,
        *,
        diffusion_a: float = DIFFUSION_A,
        diffusion_b: float = DIFFUSION_B,
        strategy: LaplacianStrategy | None = None,
    ) -> None:
        self.feed = feed
        self.kill = kill
        self.diffusion_a = diffusion_a
        self.diffusion_b = diffusion_b
        self.strategy = strategy or Configuration.laplacian_strategy()

    def laplacian(self, field: np.ndarray) -> np.ndarray:
        if self.strategy == LaplacianStrategy.ROLL:
            return laplacian_roll(field)
        return laplacian_convolve(field)

    def step(self, state: GrayScottState) -> GrayScottState:
        a, b = state.a, state.b
        reaction = a * b * b
        np.clip(
            a + self.diffusion_a * self.laplacian(a) - reaction + self.feed * (1.0 - a),
            0.0,
            1.0,
            out=state.next_a,
        )
        np.clip(
            b
            + self.diffusion_b * self.laplacian(b)
            + reaction
            - (self.kill + self.feed) * b,
            0.0,
            1.0,
            out=state.next_b,
        )
        state.swap()
        state.steps += 1
        return state

    def advance(self, state: GrayScottState, substeps: int) -> GrayScottState:
        if substeps < 0:
            raise ValueError("substeps must be non-negative")
        for _ in range(substeps):
            self.step(state)
        return state
