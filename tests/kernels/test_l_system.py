import math
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fractal_kernels.kernels.l_system import (PRESETS, BoundingBox,
                                              LSystemGrammar,
                                              LSystemStateProvider, expand,
                                              expanded_length,
                                              fit_to_viewport, interpret,
                                              rewrite)
from fractal_kernels.kernels.l_system.grammar import KOCH_SNOWFLAKE
from fractal_kernels.kernels.l_system.leaves import (LeafParticle,
                                                     step_leaves)

KOCH_ONE = "F-F++F-F++F-F++F-F++F-F++F-F"


class TestGrammarRewriting:
    """Rewriting must follow the rule table one generation at a time."""

    def test_zero_iterations_return_axiom(self) -> None:
        """The axiom is the expansion for zero generations."""

        assert KOCH_SNOWFLAKE.expand(0) == "F++F++F"

    def test_koch_generator_first_generation(self) -> None:
        """One generation of the Koch grammar replaces every F with the generator."""

        assert KOCH_SNOWFLAKE.expand(1) == KOCH_ONE

    def test_doubling_rule_length(self) -> None:
        """F -> FF doubles the string each generation."""

        assert expand("F", {"F": "FF"}, 3) == "F" * 8

    def test_symbols_without_rules_pass_through(self) -> None:
        """Unmapped symbols are copied unchanged."""

        assert rewrite("A+B-[F]", {"F": "FF"}) == "A+B-[FF]"

    def test_negative_iterations_rejected(self) -> None:
        """Negative generation counts are caller errors."""

        with pytest.raises(ValueError):
            expand("F", {"F": "FF"}, -1)

    @pytest.mark.parametrize("name", sorted(PRESETS))
    @pytest.mark.parametrize("iterations", [0, 1, 2, 3])
    def test_expanded_length_matches_expansion(self, name: str, iterations: int) -> None:
        """Multiplicity counting predicts the exact expanded length for every preset."""

        grammar = PRESETS[name]
        assert grammar.expanded_length(iterations) == len(grammar.expand(iterations))

    def test_rule_keys_must_be_single_symbols(self) -> None:
        """Multi-character rule keys cannot be applied symbol by symbol."""

        with pytest.raises(ValueError):
            LSystemGrammar(axiom="F", rules={"FF": "F"})

    def test_expanded_length_hand_count(self) -> None:
        """A small mixed grammar agrees with a hand-computed count."""

        # A -> AB, B -> A: lengths follow the Fibonacci sequence.
        assert [expanded_length("A", {"A": "AB", "B": "A"}, n) for n in range(6)] == [
            1,
            2,
            3,
            5,
            8,
            13,
        ]


class TestTurtleInterpreter:
    """Cover segment emission, the branch stack and bounds tracking."""

    def test_draws_one_segment_per_f(self) -> None:
        """Each F emits one unit segment along the heading."""

        drawing = interpret("F+F", 90.0)

        assert len(drawing.segments) == 2
        second = drawing.segments[1]
        assert second.x1 == pytest.approx(1.0)
        assert second.y2 == pytest.approx(1.0)
        assert drawing.bounds.max_x == pytest.approx(1.0)
        assert drawing.bounds.max_y == pytest.approx(1.0)
        assert (drawing.bounds.min_x, drawing.bounds.min_y) == (0.0, 0.0)

    @given(st.text(alphabet="F+-", max_size=30))
    def test_push_pop_round_trip(self, inner: str) -> None:
        """A bracketed sub-path leaves position and heading as they were."""

        before = interpret("F+F", 33.0).final_state
        after = interpret(f"F+F[{inner}]", 33.0).final_state

        assert after == before

    def test_pop_on_empty_stack_is_noop(self) -> None:
        """Unbalanced closing brackets must not crash or move the turtle."""

        drawing = interpret("F]]+F", 90.0)

        assert drawing.final_state.x == pytest.approx(1.0)
        assert drawing.final_state.y == pytest.approx(1.0)
        assert drawing.final_state.heading == pytest.approx(math.pi / 2)

    def test_spawn_probability_requires_rng(self) -> None:
        """Leaf spawning draws random numbers, so an rng must be supplied."""

        with pytest.raises(ValueError):
            interpret("F", 90.0, spawn_probability=0.5)

    def test_certain_spawn_marks_every_draw(self) -> None:
        """With probability one every segment end becomes a spawn point."""

        drawing = interpret("FFF", 90.0, spawn_probability=1.0, rng=random.Random(1))

        assert len(drawing.spawns) == 3


class TestViewportFit:
    """Fitting must keep aspect ratio and survive degenerate drawings."""

    def test_uniform_scale_uses_tighter_axis(self) -> None:
        """The smaller of the two axis scales wins."""

        fit = fit_to_viewport(BoundingBox(0, 0, 10, 5), 200, 200, padding=0)

        assert fit.scale == pytest.approx(20.0)
        assert fit.apply(0, 0) == pytest.approx((0.0, 50.0))

    @pytest.mark.parametrize("symbols", ["", "F", "+F"])
    def test_degenerate_bounds_fall_back(self, symbols: str) -> None:
        """An empty or single-line drawing never yields NaN or infinite scale."""

        bounds = interpret(symbols, 90.0).bounds
        fit = fit_to_viewport(bounds, 100, 100)

        assert math.isfinite(fit.scale) and fit.scale > 0
        assert math.isfinite(fit.offset_x) and math.isfinite(fit.offset_y)

    def test_empty_drawing_uses_fallback_scale(self) -> None:
        """No extent in either axis means the fallback scale is used as-is."""

        fit = fit_to_viewport(BoundingBox(), 100, 100, fallback_scale=2.5)

        assert fit.scale == 2.5


class TestLeaves:
    def test_leaves_age_and_expire(self) -> None:
        """Particles lose life every step and are dropped once it runs out."""

        leaf = LeafParticle(x=50.0, y=50.0, vx=0.0, vy=0.0, life=0.004)

        assert step_leaves((leaf,), angle_deg=25.0, width=100, height=100, rng=random.Random(0)) == ()


class TestLSystemStateProvider:
    """The provider grows one generation per update interval."""

    def test_generations_advance_with_time(self, scheduler) -> None:
        """Enough elapsed time advances the grammar, capped at the configured iteration count."""

        provider = LSystemStateProvider(
            scheduler, KOCH_SNOWFLAKE, 2, update_interval_ms=100.0, rng=random.Random(3)
        )
        states = []
        provider.observable().subscribe(states.append)

        for timestamp in (0, 100, 250, 1000):
            scheduler.tick(timestamp)

        assert states[0].generation == 0
        assert states[-1].generation == 2
        assert states[-1].symbols == KOCH_SNOWFLAKE.expand(2)
        assert len(states[-1].drawing.segments) == KOCH_SNOWFLAKE.expand(2).count("F")

    def test_negative_iterations_rejected(self, scheduler) -> None:
        with pytest.raises(ValueError):
            LSystemStateProvider(scheduler, KOCH_SNOWFLAKE, -1)
