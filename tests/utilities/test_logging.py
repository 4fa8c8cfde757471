import logging
from pathlib import Path

import pytest

from fractal_kernels.utilities.logging import get_logger, log_file_for


class TestLogFileFor:
    """Package loggers mirror the module tree under the log directory."""

    def test_package_module_maps_to_nested_file(self, tmp_path: Path) -> None:
        path = log_file_for("fractal_kernels.kernels.dla.grower", tmp_path)

        assert path == tmp_path / "kernels" / "dla" / "grower.log"

    def test_foreign_logger_gets_flat_file(self, tmp_path: Path) -> None:
        assert log_file_for("numba.core", tmp_path) == tmp_path / "numba_core.log"

    def test_bare_package_name_stays_flat(self, tmp_path: Path) -> None:
        assert log_file_for("fractal_kernels", tmp_path) == tmp_path / "fractal_kernels.log"

    def test_uses_environment_directory(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("FRACTAL_LOG_DIR", str(tmp_path))

        assert log_file_for("fractal_kernels.cli").parent == tmp_path


class TestGetLogger:
    def test_writes_rotating_file_in_log_dir(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Each logger gets its own file under FRACTAL_LOG_DIR."""

        monkeypatch.setenv("FRACTAL_LOG_DIR", str(tmp_path))
        logger = get_logger("fractal_kernels.tests.file_target")

        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / "tests" / "file_target.log"
        assert log_file.exists()
        assert "hello" in log_file.read_text()
        assert logger.propagate is False

    def test_existing_handlers_are_respected(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRACTAL_LOG_DIR", str(tmp_path))
        name = "fractal_kernels.tests.preconfigured"
        handler = logging.NullHandler()
        logging.getLogger(name).addHandler(handler)

        logger = get_logger(name)

        assert logger.handlers == [handler]
        assert not (tmp_path / "tests" / "preconfigured.log").exists()

    def test_level_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRACTAL_LOG_DIR", str(tmp_path))
        monkeypatch.setenv("LOG_LEVEL", "debug")

        logger = get_logger("fractal_kernels.tests.debug_level")

        assert logger.level == logging.DEBUG
