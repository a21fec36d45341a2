"""
Logging utilities for bomkeeper.

Every module obtains its logger through :func:`get_logger` so that all
records land under the ``bomkeeper`` namespace. Only the CLI calls
:func:`setup_logging`; when bomkeeper is used as a library the namespace
carries a ``NullHandler`` and the host application decides what to emit.
"""

from __future__ import annotations

import copy
import os
import sys
import logging
import threading
from typing import IO, Optional

from bomkeeper.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "bomkeeper"

_logging_configured: bool = False
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that paints the level name with ANSI colors.

    The record handed to other handlers is left untouched; coloring is
    applied to a shallow copy.
    """

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if not (color and self.use_color and _stderr_supports_color()):
            return super().format(record)

        painted = copy.copy(record)
        painted.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(painted)


def _stderr_supports_color() -> bool:
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stderr.isatty()
    except (AttributeError, OSError):
        return False


def verbosity_to_level(verbose: int) -> int:
    """Map a ``-v`` count to a logging level.

    ``0`` is WARNING, ``1`` is INFO and anything higher is DEBUG.
    """
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    *,
    level: int = logging.WARNING,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Install a single stream handler on the ``bomkeeper`` logger.

    Safe to call repeatedly; each call replaces the previous handler.

    Args:
        level: Threshold for the namespace and its handler.
        verbose: Use the timestamped format that includes logger names.
        stream: Destination stream, ``sys.stderr`` by default.
    """
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.setLevel(level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(
            ColoredFormatter(
                LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
                datefmt=LOG_DATE_FORMAT,
                use_color=not os.environ.get("NO_COLOR"),
            )
        )

        root_logger.addHandler(handler)
        root_logger.propagate = False
        _logging_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``bomkeeper`` namespace.

    ``get_logger("core.resolver")`` and ``get_logger("bomkeeper.core.resolver")``
    return the same logger.
    """
    if not name or name == ROOT_LOGGER_NAME:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
    elif name.startswith(ROOT_LOGGER_NAME + "."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())

    return logger


def is_logging_configured() -> bool:
    """Return True once :func:`setup_logging` has run."""
    return _logging_configured


def disable_logging() -> None:
    """Silence the ``bomkeeper`` namespace and forget prior configuration."""
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.NOTSET)
        _logging_configured = False
