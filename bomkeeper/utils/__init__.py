"""
Utility helpers for bomkeeper.

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Version parsing and classification helpers

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

from bomkeeper.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
    verbosity_to_level,
)
from bomkeeper.utils.console import (
    colorize_update_type,
    get_err_console,
    get_raw_console,
    print_error,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)
from bomkeeper.utils.version_utils import get_update_type, parse_version

__all__ = [
    # Console
    "print_error",
    "print_table",
    "print_success",
    "print_warning",
    "get_raw_console",
    "get_err_console",
    "reconfigure_console",
    "colorize_update_type",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
    "verbosity_to_level",
    # Versions
    "get_update_type",
    "parse_version",
]
