from typer.testing import CliRunner

from fractal_kernels.cli import app

runner = CliRunner()


class TestCli:
    def test_list_shows_registered_kernels(self) -> None:
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "lorenz" in result.output
        assert "apollonian-gasket" in result.output

    def test_run_prints_final_state(self) -> None:
        result = runner.invoke(app, ["run", "lorenz", "--frames", "3", "--max-fps", "0"])

        assert result.exit_code == 0
        assert "lorenz: steps=15" in result.output

    def test_run_with_seed_is_reproducible(self) -> None:
        args = ["run", "dla", "--frames", "2", "--seed", "5", "--max-fps", "0"]

        first = runner.invoke(app, args)
        second = runner.invoke(app, args)

        assert first.exit_code == 0
        assert first.output == second.output

    def test_unknown_kernel_exits_with_error(self) -> None:
        result = runner.invoke(app, ["run", "nope", "--frames", "1", "--max-fps", "0"])

        assert result.exit_code == 1
