"""
bomkeeper — interactive upgrade resolution for a bill-of-materials

bomkeeper helps maintainers of a curated set of pinned libraries decide,
library by library, which ones to upgrade and to which version:

    • Candidate versions per library from a local version catalog
    • Upgrade policies (any / same major / same minor), prohibited versions
      and version alignment between libraries
    • One question at a time, with "keep the current version" as default
    • All-or-nothing sessions: an interrupted session selects nothing

Library use::

    from bomkeeper import UpgradeResolver, CatalogVersionDiscovery

    resolver = UpgradeResolver(prompt_service, CatalogVersionDiscovery(catalog))
    upgrades = resolver.resolve_upgrades(to_upgrade, bom)
"""

from __future__ import annotations

from bomkeeper.__version__ import __version__
from bomkeeper.models import Library, LibraryWithVersionOptions, Upgrade, VersionOption
from bomkeeper.core import (
    CatalogVersionDiscovery,
    PromptService,
    UpgradePolicy,
    UpgradeResolver,
    VersionDiscoveryService,
)

__license__ = "Apache-2.0"
__description__ = "Interactive upgrade resolution for a bill-of-materials."

__all__ = [
    "__version__",
    "Library",
    "LibraryWithVersionOptions",
    "Upgrade",
    "VersionOption",
    "CatalogVersionDiscovery",
    "PromptService",
    "UpgradePolicy",
    "UpgradeResolver",
    "VersionDiscoveryService",
]
