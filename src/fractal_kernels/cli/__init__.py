import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import typer  # noqa: E402

from fractal_kernels.cli.commands.list_kernels import \
    list_command  # noqa: E402
from fractal_kernels.cli.commands.run import run_command  # noqa: E402

app = typer.Typer(help="Drive fractal and simulation kernels headlessly.")

app.command(name="list")(list_command)
app.command(name="run")(run_command)


def main() -> None:
    app()
