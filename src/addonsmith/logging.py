"""
Logging setup for addonsmith.

All package loggers hang off the ``addonsmith`` root logger, so one call to
``setup_logging`` configures the whole package.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_root_logger = logging.getLogger("addonsmith")

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _coerce_level(level: str | int) -> int:
    if isinstance(level, str):
        # only real level constants; names like BASIC_FORMAT are not levels
        resolved = getattr(logging, level.upper(), logging.INFO)
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(
    level: str | int = "WARNING",
    format: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Configure the package root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...) or int
        format: Custom log format string
        stream: Output stream (defaults to stderr)
    """
    level = _coerce_level(level)

    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT))
    handler.setLevel(level)
    _root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the ``addonsmith.<name>`` child logger."""
    if name.startswith("addonsmith."):
        return logging.getLogger(name)
    return logging.getLogger(f"addonsmith.{name}")


def set_level(level: str | int) -> None:
    _root_logger.setLevel(_coerce_level(level))
