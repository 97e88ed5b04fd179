"""Logger factory writing to stderr with optional file logging."""

from __future__ import annotations

import logging
from pathlib import Path

PACKAGE_LOGGER = "fabric_claims"

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _stream_owner(name: str) -> logging.Logger:
    # package loggers share one stderr handler on the package logger
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        owner = logging.getLogger(PACKAGE_LOGGER)
        owner.propagate = False
        return owner
    return logging.getLogger(name)


def get_logger(name: str, file_path: str | None = None, level: str | int | None = None) -> logging.Logger:
    """Return configured logger, attaching ``file_path`` handler if provided.

    ``level`` defaults to the ``log_level`` setting of the runtime
    configuration.  Output always targets stderr so stdout only carries the
    overlap report.
    """

    logger = logging.getLogger(name)
    formatter = logging.Formatter(_FORMAT)
    owner = _stream_owner(name)
    if not owner.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        owner.addHandler(handler)
    if file_path and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        f_handler = logging.FileHandler(file_path, encoding="utf-8")
        f_handler.setFormatter(formatter)
        logger.addHandler(f_handler)
    if level is None:
        from fabric_claims.src.utils import config_loader

        level = config_loader.LOG_LEVEL
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


def set_level(level: str | int) -> None:
    """Apply ``level`` to every logger created under ``fabric_claims``."""
    value = level.upper() if isinstance(level, str) else level
    for name, obj in logging.Logger.manager.loggerDict.items():
        if name.startswith(PACKAGE_LOGGER) and isinstance(obj, logging.Logger):
            obj.setLevel(value)
