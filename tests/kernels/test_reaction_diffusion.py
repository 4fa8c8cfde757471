import numpy as np
import pytest
import reactivex
from hypothesis import given, settings
from hypothesis import strategies as st

from fractal_kernels.kernels.reaction_diffusion import (
    FEED_RANGE, KILL_RANGE, GrayScottParameters, GrayScottState,
    GrayScottStateProvider, GrayScottStepper, laplacian_convolve,
    laplacian_roll)
from fractal_kernels.utilities.env import LaplacianStrategy


def _seeded(size: int = 48, seed: int = 0) -> GrayScottState:
    return GrayScottState.seeded(size, size, np.random.default_rng(seed))


class TestLaplacian:
    """Both Laplacian strategies use the same wrapped 3x3 stencil."""

    def test_strategies_agree(self) -> None:
        field = np.random.default_rng(3).random((17, 23))

        np.testing.assert_allclose(laplacian_convolve(field), laplacian_roll(field), atol=1e-12)

    def test_constant_field_has_zero_laplacian(self) -> None:
        field = np.full((8, 8), 0.7)

        np.testing.assert_allclose(laplacian_roll(field), 0.0, atol=1e-12)

    def test_wraps_around_edges(self) -> None:
        """A spike in a corner feeds its neighbours on the opposite edges."""

        field = np.zeros((5, 5))
        field[0, 0] = 1.0

        result = laplacian_convolve(field)

        assert result[0, 0] == pytest.approx(-1.0)
        assert result[4, 0] == pytest.approx(0.2)
        assert result[0, 4] == pytest.approx(0.2)
        assert result[4, 4] == pytest.approx(0.05)


class TestGrayScottStepper:
    @settings(max_examples=15)
    @given(
        st.floats(min_value=FEED_RANGE[0], max_value=FEED_RANGE[1]),
        st.floats(min_value=KILL_RANGE[0], max_value=KILL_RANGE[1]),
    )
    def test_concentrations_stay_in_unit_interval(self, feed: float, kill: float) -> None:
        """Clamping keeps every cell within [0, 1] for the tunable range."""

        state = _seeded(size=32)
        GrayScottStepper(feed, kill, strategy=LaplacianStrategy.ROLL).advance(state, 25)

        for grid in (state.a, state.b):
            assert np.all(grid >= 0.0) and np.all(grid <= 1.0)
        assert state.steps == 25

    def test_strategies_produce_same_evolution(self) -> None:
        rolled = _seeded(seed=11)
        convolved = _seeded(seed=11)

        GrayScottStepper(0.055, 0.062, strategy=LaplacianStrategy.ROLL).advance(rolled, 10)
        GrayScottStepper(0.055, 0.062, strategy=LaplacianStrategy.CONVOLVE).advance(convolved, 10)

        np.testing.assert_allclose(rolled.a, convolved.a, atol=1e-9)
        np.testing.assert_allclose(rolled.b, convolved.b, atol=1e-9)

    def test_step_swaps_buffers(self) -> None:
        """The next field is written into the scratch buffer which then becomes current."""

        state = _seeded()
        scratch_a = state.next_a

        GrayScottStepper(0.055, 0.062).step(state)

        assert state.a is scratch_a

    def test_uniform_steady_state(self) -> None:
        """A = 1, B = 0 everywhere is a fixed point."""

        state = GrayScottState(a=np.ones((6, 6)), b=np.zeros((6, 6)))

        GrayScottStepper(0.04, 0.06).advance(state, 5)

        np.testing.assert_allclose(state.a, 1.0)
        np.testing.assert_allclose(state.b, 0.0)

    def test_strategy_from_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRACTAL_RD_LAPLACIAN_STRATEGY", "roll")

        assert GrayScottStepper(0.05, 0.06).strategy == LaplacianStrategy.ROLL


class TestGrayScottState:
    def test_seeding_is_reproducible(self) -> None:
        first, second = _seeded(seed=5), _seeded(seed=5)

        np.testing.assert_array_equal(first.b, second.b)
        assert np.all(first.a == 1.0)
        assert 0 < first.b.sum() < first.b.size

    def test_display_field_clipped(self) -> None:
        state = _seeded()

        display = state.display()

        assert display.min() >= 0.0 and display.max() <= 1.0

    def test_mismatched_shapes_rejected(self) -> None:
        with pytest.raises(ValueError):
            GrayScottState(a=np.ones((3, 3)), b=np.zeros((3, 4)))


class TestGrayScottStateProvider:
    def test_substeps_per_frame(self, scheduler, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRACTAL_RD_SUBSTEPS", "3")
        provider = GrayScottStateProvider(
            scheduler,
            reactivex.just(GrayScottParameters(width=24, height=24)),
            rng=np.random.default_rng(0),
        )
        states = []
        provider.observable().subscribe(states.append)

        scheduler.tick(0)
        scheduler.tick(16)

        assert states[-1].steps == 6
