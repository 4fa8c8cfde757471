from collections import deque

import pytest
from hypothesis import HealthCheck, settings

from fractal_kernels.runtime.frame_scheduler import FrameScheduler

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")


class _StubClock:
    """Replays fixed frame durations in place of ``pygame.time.Clock``."""

    def __init__(self, *durations: int, default: int = 16) -> None:
        self._durations: deque[int] = deque(durations)
        self._default = default
        self.requested_fps: list[int] = []

    def tick(self, framerate: int = 0) -> int:
        self.requested_fps.append(framerate)
        if self._durations:
            return self._durations.popleft()
        return self._default


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep tests independent of the caller's FRACTAL_* settings."""

    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("FRACTAL_LOG_DIR", str(tmp_path_factory.getbasetemp() / "logs"))
    for name in (
        "FRACTAL_SEED",
        "FRACTAL_MAX_FPS",
        "FRACTAL_ESCAPE_INTERIOR_STRATEGY",
        "FRACTAL_RD_LAPLACIAN_STRATEGY",
        "FRACTAL_RD_SUBSTEPS",
        "FRACTAL_DLA_WALKERS",
        "FRACTAL_TRAIL_CAPACITY",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture()
def scheduler() -> FrameScheduler:
    return FrameScheduler()


@pytest.fixture()
def stub_clock() -> _StubClock:
    return _StubClock(16, 17, 16)


@pytest.fixture()
def clock_factory():
    return _StubClock
