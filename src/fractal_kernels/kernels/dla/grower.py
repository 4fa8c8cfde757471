from __future__ import annotations

import math
import random

import numpy as np

from fractal_kernels.kernels.dla.state import (ESCAPE_MARGIN, SEED_HALF_WIDTH,
                                               SPAWN_MARGIN, DLAParameters,
                                               DLAState, StuckCell, Walker)
from fractal_kernels.utilities.env import Configuration
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)

_NEIGHBOURS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class DLAGrower:
    """Random walkers aggregating onto a seed cluster in the middle of the grid.

    A walker moves one lattice step per call in each axis, clamped to the grid.
    Next to an occupied cell it sticks with probability ``stickiness``; when it
    strays beyond the growth radius plus a margin it is put back on the spawn
    ring. Walkers are processed in list order, so the first walker in the
    batch wins a contested cell.
    """

    def __init__(
        self, parameters: DLAParameters, rng: random.Random | None = None
    ) -> None:
        self.parameters = parameters
        self.rng = rng or random.Random(Configuration.seed())
        self.state = self._seeded_state()

    def _seeded_state(self) -> DLAState:
        params = self.parameters
        grid = np.zeros((params.rows, params.cols), dtype=bool)
        cx, cy = params.center
        rows = slice(max(cy - SEED_HALF_WIDTH, 0), cy + SEED_HALF_WIDTH + 1)
        cols = slice(max(cx - SEED_HALF_WIDTH, 0), cx + SEED_HALF_WIDTH + 1)
        grid[rows, cols] = True
        state = DLAState(
            grid=grid,
            particle_count=int(np.count_nonzero(grid)),
            max_radius=float(SEED_HALF_WIDTH * 2 + 1),
        )
        walker_count = (
            params.walkers if params.walkers is not None else Configuration.dla_walkers()
        )
        state.walkers = [self._spawn(state) for _ in range(walker_count)]
        return state

    def _clamp(self, x: int, y: int) -> tuple[int, int]:
        return (
            min(max(x, 0), self.parameters.cols - 1),
            min(max(y, 0), self.parameters.rows - 1),
        )

    def _spawn(self, state: DLAState) -> Walker:
        cx, cy = self.parameters.center
        angle = self.rng.random() * 2 * math.pi
        radius = state.max_radius + SPAWN_MARGIN
        x, y = self._clamp(
            math.floor(cx + math.cos(angle) * radius),
            math.floor(cy + math.sin(angle) * radius),
        )
        return Walker(x=x, y=y)

    def _distance(self, x: int, y: int) -> float:
        cx, cy = self.parameters.center
        return math.hypot(x - cx, y - cy)

    def _touches_cluster(self, x: int, y: int) -> bool:
        grid = self.state.grid
        rows, cols = grid.shape
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < cols and 0 <= ny < rows and grid[ny, nx]:
                return True
        return False

    def is_complete(self) -> bool:
        state = self.state
        return (
            state.particle_count >= self.parameters.target_particles
            or state.max_radius >= self.parameters.halt_radius
        )

    def _move(self, walker: Walker) -> StuckCell | None:
        state = self.state
        walker.x, walker.y = self._clamp(
            walker.x + self.rng.randint(-1, 1), walker.y + self.rng.randint(-1, 1)
        )

        distance = self._distance(walker.x, walker.y)
        if distance > state.max_radius + ESCAPE_MARGIN:
            respawned = self._spawn(state)
            walker.x, walker.y = respawned.x, respawned.y
            return None

        if (
            not state.grid[walker.y, walker.x]
            and self._touches_cluster(walker.x, walker.y)
            and self.rng.random() < self.parameters.stickiness
        ):
            state.grid[walker.y, walker.x] = True
            state.particle_count += 1
            state.max_radius = max(state.max_radius, distance)
            stuck = StuckCell(x=walker.x, y=walker.y, distance=distance)
            respawned = self._spawn(state)
            walker.x, walker.y = respawned.x, respawned.y
            return stuck
        return None

    def step(self, steps: int | None = None) -> list[StuckCell]:
        """Advance every walker ``steps`` times and return the cells that stuck."""

        state = self.state
        if steps is None:
            steps = self.parameters.steps_per_frame
        if steps < 0:
            raise ValueError("steps must be non-negative")

        stuck: list[StuckCell] = []
        for _ in range(steps):
            if self.is_complete():
                break
            for walker in state.walkers:
                event = self._move(walker)
                if event is not None:
                    stuck.append(event)
                    if self.is_complete():
                        break

        state.latest = stuck
        if not state.halted and self.is_complete():
            state.halted = True
            logger.info(
                "DLA growth halted with %s particles at radius %.1f",
                state.particle_count,
                state.max_radius,
            )
        return stuck
