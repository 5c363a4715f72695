"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``formcheck`` namespace.
    - Allow optional verbose/debug modes from the CLI.

Notes/Edge cases:
    - Library modules only obtain loggers; handlers are installed by the CLI.
    - Logging configuration is idempotent unless ``force`` is passed.
"""

from __future__ import annotations

import logging

__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]

ROOT_LOGGER = "formcheck"

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: int | str = logging.WARNING, *, force: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger once.

    Subsequent calls only adjust the level unless ``force`` is set, in which
    case existing handlers are replaced.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if force:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
