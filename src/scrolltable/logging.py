"""
Logging utilities for scrolltable.

The package logs under the ``scrolltable`` logger and never installs a
handler on its own; hosts call :func:`setup_logging` when they want output.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Package root logger
_root_logger = logging.getLogger("scrolltable")
_root_logger.addHandler(logging.NullHandler())


def setup_logging(
    level: str | int = "INFO",
    format: str | None = None,
    stream: TextIO | None = None,
    file: str | None = None,
) -> None:
    """
    Configure logging for scrolltable.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int
        format: Custom log format string
        stream: Output stream (defaults to stderr)
        file: Optional file path to write logs

    Example:
        from scrolltable.logging import setup_logging

        # A full-screen host usually wants logs in a file, not on the tty
        setup_logging("DEBUG", file="table.log", stream=None)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    if format is None:
        format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    formatter = logging.Formatter(format)

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(level)
    _root_logger.addHandler(stream_handler)

    if file:
        file_handler = logging.FileHandler(file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        _root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a submodule.

    Args:
        name: Submodule name (e.g., "table", "keybindings")

    Returns:
        Logger instance
    """
    if name.startswith("scrolltable."):
        return logging.getLogger(name)
    return logging.getLogger(f"scrolltable.{name}")


def set_level(level: str | int) -> None:
    """Set the log level for scrolltable."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _root_logger.setLevel(level)


def disable() -> None:
    """Disable all logging for scrolltable."""
    _root_logger.disabled = True


def enable() -> None:
    """Re-enable logging for scrolltable."""
    _root_logger.disabled = False
