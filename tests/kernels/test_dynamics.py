import math

import pytest
import reactivex

from fractal_kernels.kernels.dynamics import (LORENZ_START, DoublePendulum,
                                              DoublePendulumStateProvider,
                                              LorenzParameters, LorenzSystem,
                                              LorenzStateProvider,
                                              PendulumParameters,
                                              PendulumState, TrailBuffer,
                                              project)


class TestLorenzSystem:
    """Explicit Euler integration of the Lorenz equations."""

    def test_derivatives_match_equations(self) -> None:
        system = LorenzSystem()

        assert system.derivatives((1.0, 2.0, 3.0)) == pytest.approx(
            (10.0, 1.0 * (28.0 - 3.0) - 2.0, 2.0 - 8.0)
        )

    def test_trajectory_stays_inside_attractor_envelope(self) -> None:
        """10 000 steps at dt = 0.01 never leave the |x|, |y|, |z| < 60 box."""

        points = LorenzSystem().integrate(LORENZ_START, 10_000, 0.01)

        assert len(points) == 10_000
        for point in points:
            assert all(abs(value) < 60 for value in point)

    def test_sensitive_to_initial_conditions(self) -> None:
        """A 1e-9 nudge grows to a macroscopic separation."""

        system = LorenzSystem()
        a = system.integrate(LORENZ_START, 5_000, 0.01)[-1]
        b = system.integrate((0.1 + 1e-9, 0.0, 0.0), 5_000, 0.01)[-1]

        assert math.dist(a, b) > 1.0

    def test_origin_is_fixed_point(self) -> None:
        assert LorenzSystem().step((0.0, 0.0, 0.0), 0.01) == (0.0, 0.0, 0.0)

    def test_projection_flips_z(self) -> None:
        assert project((1.0, 5.0, 2.0), scale=8.0) == (8.0, -16.0)


class TestDoublePendulum:
    def test_hanging_at_rest_stays_at_rest(self) -> None:
        pendulum = DoublePendulum()
        state = PendulumState(a1=0.0, a2=0.0)

        assert pendulum.accelerations(state) == pytest.approx((0.0, 0.0))
        assert pendulum.step(state) == state

    def test_bob_positions_hang_below_pivot(self) -> None:
        bobs = DoublePendulum().positions(PendulumState(a1=0.0, a2=0.0), (200.0, 100.0))

        assert (bobs.x1, bobs.y1) == pytest.approx((200.0, 200.0))
        assert (bobs.x2, bobs.y2) == pytest.approx((200.0, 300.0))

    def test_damping_scales_velocities(self) -> None:
        pendulum = DoublePendulum(gravity=0.0)
        state = PendulumState(a1=0.0, a2=0.0, a1_v=0.0, a2_v=0.0)

        # Without gravity and at rest nothing accelerates, so only damping acts.
        moving = PendulumState(a1=0.0, a2=0.0, a1_v=0.01, a2_v=0.01)
        stepped = pendulum.step(moving)

        assert pendulum.step(state) == state
        assert stepped.a1_v == pytest.approx(0.01 * 0.9999)

    def test_sensitive_to_initial_conditions(self) -> None:
        """Released from horizontal, two almost identical pendulums drift apart."""

        pendulum = DoublePendulum()
        a = PendulumState()
        b = PendulumState(a1=math.pi / 2 + 1e-9)
        for _ in range(5_000):
            a = pendulum.step(a)
            b = pendulum.step(b)

        assert math.isfinite(a.a2) and math.isfinite(b.a2)
        assert abs(a.a2 - b.a2) > 1e-3


class TestTrailBuffer:
    def test_oldest_points_evicted(self) -> None:
        trail = TrailBuffer(3)
        for point in range(5):
            trail.append(point)

        assert list(trail) == [2, 3, 4]
        assert trail.latest() == 4
        assert trail.capacity == 3

    def test_capacity_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            TrailBuffer(0)


class TestDynamicsProviders:
    def test_lorenz_substeps_fill_trail(self, scheduler, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRACTAL_TRAIL_CAPACITY", "12")
        provider = LorenzStateProvider(scheduler, reactivex.just(LorenzParameters(speed=1.0)))
        states = []
        provider.observable().subscribe(states.append)

        for frame in range(4):
            scheduler.tick(frame * 16)

        assert states[-1].steps == 20
        assert len(states[-1].trail) == 12
        assert states[-1].trail.latest() == states[-1].point

    def test_pendulum_trail_length(self, scheduler) -> None:
        provider = DoublePendulumStateProvider(
            scheduler, reactivex.just(PendulumParameters(trail_length=5))
        )
        states = []
        provider.observable().subscribe(states.append)

        for frame in range(8):
            scheduler.tick(frame * 16)

        assert states[-1].frames == 8
        assert len(states[-1].trail) == 5
