"""Logging helpers built on top of Rich."""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

Logger = logging.Logger

_LOGGER_NAME = "recommendations"


def _configure_root_logger(level: str | int) -> logging.Logger:
    """Install a Rich handler on the root logger once per process."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_time=True,
                show_level=True,
                show_path=False,
            )
        ],
    )
    return logging.getLogger(_LOGGER_NAME)


_logger: logging.Logger | None = None


def get_logger(level: str | int = logging.INFO) -> logging.Logger:
    """Return the application logger, configuring it on first use.

    ``level`` only applies to the first call; later calls return the already configured logger.
    """

    global _logger
    if _logger is None:
        _logger = _configure_root_logger(level)
    return _logger


def log_structured(logger: Logger, event: str, *, level: int = logging.INFO, **extra: Any) -> None:
    """Emit a snake_case ``event`` with its fields attached as ``extra`` attributes.

    Field names that collide with :class:`logging.LogRecord` attributes (``name``, ``msg``, ...) are rejected by the
    logging module, so callers prefix them, e.g. ``recommendation_name``.
    """

    logger.log(level, "%s", event, extra=extra)


__all__ = ["get_logger", "log_structured", "Logger"]
