from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pathlib import Path

_LOGGER_NAME = "cmdconfig"
_LOGGING_CONFIGURED = False

_PROCESSORS = [
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def setup_logging(level: int | str = logging.WARNING, filename: str | Path | None = None) -> structlog.stdlib.BoundLogger:
    """Set up structured logging for the cmdconfig tools.

    Only the first call installs a handler; later calls just return the logger.
    Until this is called the library stays silent below WARNING.

    Args:
        level: Minimum level, as a `logging` constant or name.
        filename: Optional path to a log file. If None, logs are written to stderr.

    Returns:
        The package logger.
    """
    global _LOGGING_CONFIGURED
    if not _LOGGING_CONFIGURED:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        handler: logging.Handler
        if filename:
            handler = logging.FileHandler(str(filename), encoding="utf-8")
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))

        root = logging.getLogger(_LOGGER_NAME)
        root.addHandler(handler)
        root.setLevel(level)
        root.propagate = False
        _LOGGING_CONFIGURED = True

    return get_logger()


def get_logger() -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(_LOGGER_NAME),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
