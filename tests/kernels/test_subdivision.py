import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fractal_kernels.kernels.subdivision import (MENGER_RETAINED_OFFSETS,
                                                 TETRAHEDRON_SPIN,
                                                 BronchialTreeStateProvider,
                                                 Cube, SpinningGeometryProvider,
                                                 SpinState,
                                                 SpinStateProvider,
                                                 breathing_scale,
                                                 bronchial_tree,
                                                 equilateral_triangle,
                                                 leaf_count, menger_sponge,
                                                 project, project_cubes,
                                                 regular_tetrahedron,
                                                 rodrigues_rotate,
                                                 sierpinski_tetrahedron,
                                                 sierpinski_triangle,
                                                 subdivide)


class TestSubdivisionEngine:
    """The work-list engine emits ``branching ** depth`` leaves."""

    @pytest.mark.parametrize("depth", range(5))
    def test_sierpinski_triangle_leaf_count(self, depth: int) -> None:
        root = equilateral_triangle(400, 400)

        triangles = sierpinski_triangle(root, depth)

        assert len(triangles) == 3**depth == leaf_count(3, depth)
        assert sum(t.area for t in triangles) == pytest.approx(root.area * 0.75**depth)

    @pytest.mark.parametrize("depth", range(4))
    def test_sierpinski_tetrahedron_leaf_count(self, depth: int) -> None:
        assert len(sierpinski_tetrahedron(regular_tetrahedron(), depth)) == 4**depth

    @pytest.mark.parametrize("depth", range(3))
    def test_menger_sponge_leaf_count(self, depth: int) -> None:
        cubes = menger_sponge(Cube(0.0, 0.0, 0.0, 270.0), depth)

        assert len(cubes) == 20**depth
        assert all(cube.size == pytest.approx(270.0 / 3**depth) for cube in cubes)

    def test_menger_step_keeps_twenty_offsets(self) -> None:
        """Face centres and the core are the seven removed sub-cubes."""

        assert len(MENGER_RETAINED_OFFSETS) == 20
        assert (1, 1, 1) not in MENGER_RETAINED_OFFSETS
        assert (1, 1, 0) not in MENGER_RETAINED_OFFSETS
        assert (0, 1, 0) in MENGER_RETAINED_OFFSETS

    def test_depth_zero_returns_root(self) -> None:
        assert subdivide("root", 0, lambda p: [p, p]) == ["root"]

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError):
            subdivide("root", -1, lambda p: [p])

    def test_leaves_in_depth_first_order(self) -> None:
        """Children are visited in the order the split returns them."""

        leaves = subdivide("", 2, lambda p: [p + "a", p + "b"])

        assert leaves == ["aa", "ab", "ba", "bb"]


class TestProjection:
    """Rotation and perspective helpers for the 3-D views."""

    @given(
        st.tuples(*[st.floats(-100, 100)] * 3),
        st.floats(-math.pi, math.pi),
    )
    def test_rodrigues_preserves_length(self, v, theta: float) -> None:
        rotated = rodrigues_rotate(v, (1.0, 2.0, 3.0), theta)

        assert math.dist(rotated, (0, 0, 0)) == pytest.approx(
            math.dist(v, (0, 0, 0)), abs=1e-9
        )

    def test_zero_axis_leaves_vector_unchanged(self) -> None:
        assert rodrigues_rotate((1.0, 2.0, 3.0), (0.0, 0.0, 0.0), 1.0) == (1.0, 2.0, 3.0)

    def test_quarter_turn_about_z(self) -> None:
        x, y, z = rodrigues_rotate((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), math.pi / 2)

        assert (x, y, z) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)

    def test_points_behind_camera_are_dropped(self) -> None:
        assert project((0.0, 0.0, -400.0), 0.0, 0.0) is None
        assert project((0.0, 0.0, 0.0), 10.0, 20.0).x == 10.0

    def test_cubes_sorted_far_to_near(self) -> None:
        cubes = [Cube(0.0, 0.0, z, 30.0) for z in (-50.0, 100.0, 20.0)]

        ordered = project_cubes(cubes, 0.0, 0.0, 0.0, 0.0)

        assert [item.cube.z for item in ordered] == [100.0, 20.0, -50.0]


class TestBronchialTree:
    @pytest.mark.parametrize("depth", range(6))
    def test_branch_count(self, depth: int) -> None:
        """Every branch splits in two until the deepest level."""

        assert len(bronchial_tree(depth)) == 2 ** (depth + 1) - 1

    def test_children_start_at_parent_end(self) -> None:
        branches = bronchial_tree(1)
        root = next(b for b in branches if b.level == 0)

        for child in (b for b in branches if b.level == 1):
            assert child.start == root.end
            assert child.width == pytest.approx(root.width * 0.7)


class TestSpinStateProvider:
    def test_angles_advance_per_frame(self, scheduler) -> None:
        states = []
        SpinStateProvider(scheduler, rates=(0.1, 0.2)).observable().subscribe(states.append)

        scheduler.tick(0)
        scheduler.tick(500)

        assert states[0] == SpinState()
        assert states[-1].angle_x == pytest.approx(0.2)
        assert states[-1].angle_y == pytest.approx(0.4)
        assert states[-1].time_s == pytest.approx(0.5)


def _root_length(branches) -> float:
    root = branches[0]
    return math.dist(root.start, root.end)


class TestBreathingTree:
    """The bronchial tree swells and shrinks by ten percent as it breathes."""

    @given(st.floats(min_value=0.0, max_value=1e4, allow_nan=False))
    def test_scale_stays_within_ten_percent(self, time_s: float) -> None:
        assert 0.9 - 1e-12 <= breathing_scale(time_s) <= 1.1 + 1e-12

    def test_breathing_disabled_keeps_unit_scale(self) -> None:
        assert breathing_scale(0.8, breathing=False) == 1.0

    def test_root_length_oscillates_over_frames(self, scheduler) -> None:
        states = []
        BronchialTreeStateProvider(scheduler, depth=2).observable().subscribe(states.append)

        for frame in range(41):
            scheduler.tick(frame * 100.0)

        lengths = [_root_length(state.items) for state in states]
        assert lengths[0] == pytest.approx(120.0)
        assert max(lengths) == pytest.approx(132.0, rel=1e-2)
        assert min(lengths) == pytest.approx(108.0, rel=1e-2)
        for state, length in zip(states, lengths):
            assert length == pytest.approx(120.0 * state.scale)
            assert len(state.items) == 7

    def test_tree_rotates_while_breathing(self, scheduler) -> None:
        states = []
        BronchialTreeStateProvider(scheduler, depth=1).observable().subscribe(states.append)

        scheduler.tick(0)
        scheduler.tick(16)

        assert states[-1].spin.angle_y == pytest.approx(0.01)

    def test_negative_depth_rejected(self, scheduler) -> None:
        with pytest.raises(ValueError):
            BronchialTreeStateProvider(scheduler, depth=-1)


class TestSpinningGeometryProvider:
    def test_geometry_is_fixed_while_view_turns(self, scheduler) -> None:
        tetrahedra = sierpinski_tetrahedron(regular_tetrahedron(), 1)
        states = []
        SpinningGeometryProvider(scheduler, tetrahedra, TETRAHEDRON_SPIN).observable().subscribe(
            states.append
        )

        scheduler.tick(0)
        scheduler.tick(16)
        scheduler.tick(32)

        assert [state.spin.angle_y for state in states] == pytest.approx([0.0, 0.01, 0.02, 0.03])
        assert all(tuple(state.items) == tuple(tetrahedra) for state in states)
