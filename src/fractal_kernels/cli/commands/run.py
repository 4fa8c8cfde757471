from typing import Annotated, Any, Optional

import typer

from fractal_kernels.runtime.clock_driver import ClockFrameDriver
from fractal_kernels.runtime.container import build_runtime_container
from fractal_kernels.runtime.frame_scheduler import FrameScheduler
from fractal_kernels.runtime.registry import KernelRegistry
from fractal_kernels.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FRAMES = 60


def run_command(
    kernel: Annotated[str, typer.Argument(help="Registered kernel name")],
    frames: int = typer.Option(
        DEFAULT_FRAMES, "--frames", min=0, help="Number of frames to advance"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", min=0, help="Seed for the kernel's random source"
    ),
    max_fps: Optional[int] = typer.Option(
        None,
        "--max-fps",
        min=0,
        help="Frame pacing; 0 runs unthrottled. Defaults to FRACTAL_MAX_FPS.",
    ),
) -> None:
    """Advance a kernel for a number of frames and print its final state."""

    overrides: dict[type[Any], object] = {}
    if max_fps is not None:
        scheduler = FrameScheduler()
        overrides[FrameScheduler] = scheduler
        overrides[ClockFrameDriver] = ClockFrameDriver(scheduler, max_fps=max_fps)
    resolver = build_runtime_container(overrides=overrides)

    registry = resolver.resolve(KernelRegistry)
    entry = registry.get(kernel)
    if entry is None:
        logger.error("Kernel '%s' not found in registry", kernel)
        raise typer.Exit(code=1)

    scheduler = resolver.resolve(FrameScheduler)
    driver = resolver.resolve(ClockFrameDriver)
    provider = entry.build(scheduler, seed)

    latest: list[object] = []

    def keep_latest(state: object) -> None:
        latest[:] = [state]

    subscription = provider.observable().subscribe(on_next=keep_latest)
    try:
        completed = driver.run(frames)
    finally:
        subscription.dispose()

    if not latest:
        logger.error("Kernel '%s' produced no state", kernel)
        raise typer.Exit(code=1)
    summary = entry.summarize(latest[-1])
    logger.info("Ran '%s' for %s frame(s): %s", kernel, completed, summary)
    typer.echo(f"{kernel}: {summary}")
