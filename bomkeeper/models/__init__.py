"""
Unified data model exports for bomkeeper.

Example:
    >>> from bomkeeper.models import Library, Upgrade, VersionOption
"""

from __future__ import annotations

from bomkeeper.models.version import VersionOption
from bomkeeper.models.library import Library, LibraryWithVersionOptions
from bomkeeper.models.upgrade import Upgrade

__all__ = [
    "VersionOption",
    "Library",
    "LibraryWithVersionOptions",
    "Upgrade",
]
