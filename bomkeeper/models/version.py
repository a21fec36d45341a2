"""
Version option value object for bomkeeper.

A :class:`VersionOption` is one entry in the list an operator picks from:
either a candidate upgrade or the library's current version, which is
always offered first as the "keep as is" default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class VersionOption:
    """An immutable candidate version.

    Two options are equal when their version strings are equal; ``note``
    is presentation only and ignored by ``==`` and ``hash``. Prompt
    services may therefore rebuild option objects freely.

    Attributes:
        version: Version string, e.g. ``"6.1.2"``.
        note: Optional explanation shown next to the version, e.g.
            ``"aligned with spring-framework 6.1.2"``.
    """

    version: str
    note: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.version, str) or not self.version.strip():
            raise ValueError(f"Version must be a non-empty string, got {self.version!r}")
        object.__setattr__(self, "version", self.version.strip())

    def with_note(self, note: str) -> "VersionOption":
        """Return an equal option carrying ``note``."""
        return VersionOption(self.version, note)

    def __str__(self) -> str:
        if self.note:
            return f"{self.version} ({self.note})"
        return self.version
