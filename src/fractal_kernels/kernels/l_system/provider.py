from __future__ import annotations

import random
from dataclasses import replace

import reactivex
from reactivex import operators as ops

from fractal_kernels.kernels.l_system.grammar import LSystemGrammar, rewrite
from fractal_kernels.kernels.l_system.leaves import spawn_leaf, step_leaves
from fractal_kernels.kernels.l_system.state import LSystemState
from fractal_kernels.kernels.l_system.turtle import fit_to_viewport, interpret
from fractal_kernels.kernels.providers import RngStateProvider
from fractal_kernels.runtime.frame_scheduler import FrameScheduler, FrameTick
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)

LEAF_SPAWN_PROBABILITY = 0.3


def _draw(
    grammar: LSystemGrammar,
    symbols: str,
    *,
    spawn_probability: float,
    rng: random.Random,
):
    return interpret(
        symbols,
        grammar.angle_deg,
        heading_deg=grammar.heading_deg,
        spawn_probability=spawn_probability,
        rng=rng,
    )


def _advance_state(
    state: LSystemState,
    *,
    dt_ms: float,
    update_interval_ms: float,
    max_generation: int,
    spawn_probability: float,
    rng: random.Random,
) -> LSystemState:
    accumulated = state.time_since_last_update_ms + dt_ms
    symbols = state.symbols
    generation = state.generation

    while accumulated >= update_interval_ms and generation < max_generation:
        symbols = rewrite(symbols, state.grammar.rules)
        generation += 1
        accumulated -= update_interval_ms

    if generation == state.generation:
        return replace(state, time_since_last_update_ms=accumulated)

    logger.debug("L-system advanced to generation %s (%s symbols)", generation, len(symbols))
    return replace(
        state,
        symbols=symbols,
        drawing=_draw(
            state.grammar, symbols, spawn_probability=spawn_probability, rng=rng
        ),
        generation=generation,
        time_since_last_update_ms=accumulated,
    )


class LSystemStateProvider(RngStateProvider[LSystemState]):
    """Grows a grammar one generation per ``update_interval_ms`` up to ``iterations``.

    With ``leaves`` enabled the plant sheds wind-blown particles into a
    ``width`` x ``height`` viewport every frame.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        grammar: LSystemGrammar,
        iterations: int,
        *,
        update_interval_ms: float = 1000.0,
        leaves: bool = False,
        width: float = 400.0,
        height: float = 400.0,
        rng: random.Random | None = None,
    ) -> None:
        if iterations < 0:
            raise ValueError("iterations must be non-negative")
        if update_interval_ms <= 0:
            raise ValueError("update_interval_ms must be positive")
        super().__init__(rng=rng)
        self._scheduler = scheduler
        self._grammar = grammar
        self._iterations = iterations
        self._update_interval_ms = update_interval_ms
        self._leaves = leaves
        self._width = width
        self._height = height

    @property
    def spawn_probability(self) -> float:
        return LEAF_SPAWN_PROBABILITY if self._leaves else 0.0

    def initial_state(self) -> LSystemState:
        return LSystemState(
            grammar=self._grammar,
            symbols=self._grammar.axiom,
            drawing=_draw(
                self._grammar,
                self._grammar.axiom,
                spawn_probability=self.spawn_probability,
                rng=self.rng,
            ),
        )

    def next_state(self, state: LSystemState, tick: FrameTick) -> LSystemState:
        advanced = _advance_state(
            state,
            dt_ms=tick.delta_ms,
            update_interval_ms=self._update_interval_ms,
            max_generation=self._iterations,
            spawn_probability=self.spawn_probability,
            rng=self.rng,
        )
        if not self._leaves:
            return advanced
        return self._step_leaves(advanced)

    def _step_leaves(self, state: LSystemState) -> LSystemState:
        fit = fit_to_viewport(state.drawing.bounds, self._width, self._height)
        screen_spawns = tuple(fit.apply(x, y) for x, y in state.drawing.spawns)
        leaves = step_leaves(
            state.leaves,
            angle_deg=self._grammar.angle_deg,
            width=self._width,
            height=self._height,
            rng=self.rng,
        )
        spawned = spawn_leaf(screen_spawns, self.rng)
        if spawned is not None:
            leaves = leaves + (spawned,)
        return replace(state, leaves=leaves)

    def observable(self) -> reactivex.Observable[LSystemState]:
        initial_state = self.initial_state()
        return self._scheduler.frames.pipe(
            ops.scan(self.next_state, seed=initial_state),
            ops.start_with(initial_state),
            ops.share(),
        )
