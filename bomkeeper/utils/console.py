"""
Console output utilities for bomkeeper using Rich.

User-facing output for CLI commands goes through the shared console
returned by :func:`get_raw_console`. The interactive prompt renders on
:func:`get_err_console` so that command output on stdout can be piped.
Diagnostics belong in :mod:`bomkeeper.utils.logger`, never here.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, List, Optional

from rich.table import Table
from rich.theme import Theme
from rich.console import Console

BOMKEEPER_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
        "highlight": "bold magenta",
    }
)

_console: Optional[Console] = None
_err_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return the process-wide Rich console, creating it on first use."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=BOMKEEPER_THEME,
                    no_color=not use_color,
                    highlight=use_color,
                )
    return _console


def get_raw_console() -> Console:
    """Return the underlying Rich Console instance."""
    return _get_console()


def get_err_console() -> Console:
    """Return the shared console writing to stderr.

    Interactive menus go here so that stdout carries only command output.
    """
    global _err_console

    if _err_console is None:
        with _console_lock:
            if _err_console is None:
                use_color = _should_use_color()
                _err_console = Console(
                    theme=BOMKEEPER_THEME,
                    stderr=True,
                    no_color=not use_color,
                    highlight=False,
                )
    return _err_console


def reconfigure_console() -> None:
    """Drop the shared console so the next call rebuilds it.

    Needed after ``--no-color`` toggles ``NO_COLOR`` at runtime.
    """
    global _console, _err_console
    with _console_lock:
        _console = None
        _err_console = None


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    _get_console().print(f"{prefix} {message}", style="success", markup=False)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    _get_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    _get_console().print(f"{prefix} {message}", style="warning", markup=False)


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> None:
    """Render a list of row dictionaries as a Rich table.

    Args:
        data: Rows; nothing is printed when empty.
        headers: Column order. Defaults to keys of the first row.
        title: Optional table title.
        column_styles: Per-column ``style``/``justify``/``no_wrap`` settings.
    """
    if not data:
        return

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold")

    column_styles = column_styles or {}
    for header in headers:
        config = column_styles.get(header, {})
        table.add_column(
            header,
            style=config.get("style"),
            justify=config.get("justify", "default"),
            no_wrap=config.get("no_wrap", False),
        )

    for row in data:
        table.add_row(*(str(row.get(h, "")) for h in headers))

    _get_console().print(table)


def colorize_update_type(update_type: str) -> str:
    """Return a Rich-markup colored update type label."""
    color_map = {
        "major": "red",
        "minor": "yellow",
        "patch": "green",
        "update": "cyan",
        "downgrade": "red",
    }

    color = color_map.get(update_type.lower())
    return f"[{color}]{update_type}[/{color}]" if color else update_type
