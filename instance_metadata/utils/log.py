"""Opt-in debug logging for the package.

The package logger is disabled on import (see `instance_metadata/__init__.py`),
so nothing is emitted unless a host application enables it.
"""

from typing import Any

from loguru import logger

PACKAGE = "instance_metadata"


def enable_debug_logging(sink: Any, level: str = "DEBUG") -> int:
    """Enable the package logger and route its records to `sink`.

    `sink` is anything loguru accepts (a file object, a path, a callable).
    Returns the handler ID to pass to `disable_debug_logging()`.
    """
    logger.enable(PACKAGE)
    return logger.add(sink, level=level, filter=PACKAGE)


def disable_debug_logging(handler_id: int) -> None:
    """Remove a sink added with `enable_debug_logging()` and silence the package."""
    logger.remove(handler_id)
    logger.disable(PACKAGE)
