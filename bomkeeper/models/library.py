"""
Library data models for bomkeeper.

This module defines the BOM entry (:class:`Library`) and the pairing of a
library with the version options discovery found for it
(:class:`LibraryWithVersionOptions`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from bomkeeper.models.version import VersionOption


@dataclass(frozen=True)
class Library:
    """A named, versioned entry of the bill-of-materials.

    Instances are owned by the caller and never modified while upgrades
    are being resolved.

    Attributes:
        name: Unique library name within a BOM.
        version: The currently managed version.
        align_with: Name of another library whose version this one tracks,
            e.g. ``spring-security`` following ``spring-framework``.
        prohibited: Version strings that must never be offered.
        metadata: Opaque extra data from the BOM file. Excluded from
            equality and hashing.
    """

    name: str
    version: VersionOption
    align_with: Optional[str] = None
    prohibited: Tuple[str, ...] = ()
    metadata: Mapping[str, Any] = field(
        default_factory=dict,
        compare=False,
        hash=False,
        repr=False,
    )

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Library name must be a non-empty string, got {self.name!r}")
        object.__setattr__(self, "name", self.name.strip())

        # Allow plain strings for convenience: Library("x", "1.0")
        if isinstance(self.version, str):
            object.__setattr__(self, "version", VersionOption(self.version))

        object.__setattr__(self, "prohibited", tuple(self.prohibited))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def current_version(self) -> str:
        """The current version as a plain string."""
        return self.version.version

    def is_prohibited(self, version: str) -> bool:
        return version in self.prohibited

    def __str__(self) -> str:
        return f"{self.name} {self.current_version}"


@dataclass(frozen=True)
class LibraryWithVersionOptions:
    """A library together with the versions it could be upgraded to.

    ``version_options`` is ordered as discovery returned it and may be
    empty, which means no viable upgrade exists.
    """

    library: Library
    version_options: Tuple[VersionOption, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "version_options", tuple(self.version_options))

    @property
    def has_options(self) -> bool:
        return bool(self.version_options)
