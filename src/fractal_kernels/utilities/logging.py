import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

PACKAGE_NAME = "fractal_kernels"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "FRACTAL_LOG_DIR"
DEFAULT_LOG_SUBDIR = Path(".fractal_kernels") / "logs"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_log_directory() -> Path:
    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if log_dir:
        return Path(log_dir).expanduser()
    return Path.home() / DEFAULT_LOG_SUBDIR


def log_file_for(name: str, log_dir: Path | None = None) -> Path:
    """Where the logger called ``name`` writes.

    Package loggers mirror the module tree, so
    ``fractal_kernels.kernels.dla.grower`` lands in ``kernels/dla/grower.log``.
    Anything else gets a flat file named after the sanitized logger name.
    """

    root = log_dir if log_dir is not None else _resolve_log_directory()
    parts = [part for part in name.replace(os.sep, ".").split(".") if part]
    if len(parts) > 1 and parts[0] == PACKAGE_NAME:
        *folders, stem = parts[1:]
        return root.joinpath(*folders, f"{stem}.log")
    return root / f"{'_'.join(parts) or 'root'}.log"


def _configure_logger(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)

    if logger.handlers:
        # Logger already configured elsewhere; respect existing handlers.
        return

    formatter = logging.Formatter(LOG_FORMAT)
    log_file = log_file_for(logger.name)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=BACKUP_COUNT),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger configured with stream and rolling file handlers."""

    level_name = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logger = logging.getLogger(name)
    _configure_logger(logger, getattr(logging, level_name, logging.INFO))
    return logger
