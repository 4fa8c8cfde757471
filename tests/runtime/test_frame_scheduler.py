import pytest

from fractal_kernels.runtime.frame_scheduler import FrameScheduler


class TestFrameScheduler:
    """Step functions see per-handle deltas and stop immediately when detached."""

    def test_first_call_receives_zero_delta(self, scheduler: FrameScheduler) -> None:
        """The very first invocation is a no-op delta regardless of the timestamp."""

        deltas = []
        scheduler.start(deltas.append)

        scheduler.tick(1000.0)
        scheduler.tick(1016.0)
        scheduler.tick(1050.0)

        assert deltas == [0.0, 16.0, 34.0]

    def test_late_subscriber_starts_from_zero(self, scheduler: FrameScheduler) -> None:
        """Each handle measures time from the first tick it observed."""

        early, late = [], []
        scheduler.start(early.append)
        scheduler.tick(0.0)
        scheduler.tick(10.0)
        scheduler.start(late.append)
        scheduler.tick(30.0)

        assert early == [0.0, 10.0, 20.0]
        assert late == [0.0]

    def test_stop_prevents_further_calls(self, scheduler: FrameScheduler) -> None:
        calls = []
        handle = scheduler.start(calls.append)
        scheduler.tick(0.0)

        scheduler.stop(handle)
        scheduler.tick(16.0)

        assert calls == [0.0]
        assert not handle.active
        assert scheduler.active_handles == ()

    def test_stop_is_idempotent(self, scheduler: FrameScheduler) -> None:
        handle = scheduler.start(lambda _: None)

        scheduler.stop(handle)
        scheduler.stop(handle)

        assert scheduler.active_handles == ()

    def test_stop_from_inside_step(self, scheduler: FrameScheduler) -> None:
        """A step function may detach itself; it is not invoked again."""

        calls = []

        def step(delta: float) -> None:
            calls.append(delta)
            scheduler.stop(handle)

        handle = scheduler.start(step)
        scheduler.tick(0.0)
        scheduler.tick(16.0)

        assert calls == [0.0]

    def test_stop_other_handle_mid_tick(self, scheduler: FrameScheduler) -> None:
        """A handle stopped by an earlier step in the same tick is skipped."""

        second_calls = []

        def first(_: float) -> None:
            scheduler.stop(second)

        scheduler.start(first)
        second = scheduler.start(second_calls.append)
        scheduler.tick(0.0)

        assert second_calls == []

    def test_stop_all_detaches_everything(self, scheduler: FrameScheduler) -> None:
        calls = []
        scheduler.start(calls.append)
        scheduler.start(calls.append)

        scheduler.stop_all()
        scheduler.tick(0.0)

        assert calls == []

    def test_advance_moves_clock(self, scheduler: FrameScheduler) -> None:
        deltas = []
        scheduler.start(deltas.append)

        scheduler.advance(5.0)
        scheduler.advance(20.0)

        assert deltas == [0.0, 20.0]

    def test_step_errors_propagate_to_host(self, scheduler: FrameScheduler) -> None:
        def step(_: float) -> None:
            raise RuntimeError("boom")

        scheduler.start(step)

        with pytest.raises(RuntimeError):
            scheduler.tick(0.0)

    def test_frames_stream_counts_ticks(self, scheduler: FrameScheduler) -> None:
        ticks = []
        scheduler.frames.subscribe(ticks.append)

        scheduler.tick(5.0)
        scheduler.tick(9.0)

        assert [tick.index for tick in ticks] == [0, 1]
        assert ticks[-1].delta_ms == 4.0
