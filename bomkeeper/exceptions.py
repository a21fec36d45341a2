"""
Custom exception hierarchy for bomkeeper.

This module defines structured exception types used across bomkeeper.
All exceptions inherit from :class:`BomKeeperError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Operator cancellation is deliberately absent from this hierarchy: an
interrupted prompt session is reported through
:class:`bomkeeper.core.selector.Selection`, never raised.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class BomKeeperError(Exception):
    """Base exception for all bomkeeper errors.

    All bomkeeper-specific exceptions should inherit from this class.
    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class ConfigError(BomKeeperError):
    """Raised when a configuration file is missing, unreadable or invalid.

    Args:
        message: Error description.
        config_path: Path of the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class BomError(BomKeeperError):
    """Raised when a BOM or catalog file cannot be loaded.

    Args:
        message: Error description.
        file_path: Path to the file being loaded.
        entry: Zero-based index of the offending ``[[library]]`` entry.
    """

    __slots__ = ("file_path", "entry")

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        entry: Optional[int] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "file", file_path)
        _add_if(details, "entry", entry)

        super().__init__(message, details)

        self.file_path = file_path
        self.entry = entry


class ContractViolationError(BomKeeperError):
    """Raised when a caller or collaborator breaks the resolver's contract.

    Examples are duplicate library names in the BOM or a discovery
    service that returns entries in a different number or order than
    the libraries it was asked about.

    Args:
        message: Error description.
        expected: What the contract required.
        actual: What was observed instead.
    """

    __slots__ = ("expected", "actual")

    def __init__(
        self,
        message: str,
        *,
        expected: Any = None,
        actual: Any = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "expected", expected)
        _add_if(details, "actual", actual)

        super().__init__(message, details)

        self.expected = expected
        self.actual = actual
