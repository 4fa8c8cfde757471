import typer

from fractal_kernels.runtime.container import build_runtime_container
from fractal_kernels.runtime.registry import KernelRegistry


def list_command() -> None:
    """List the registered kernels."""

    registry = build_runtime_container().resolve(KernelRegistry)
    typer.echo(f"{len(registry)} kernel(s) registered.")
    for entry in registry.entries():
        typer.echo(f"- {entry.name}: {entry.description}")
