"""
Core functionality exports for bomkeeper.

    from bomkeeper.core import UpgradeResolver, CatalogVersionDiscovery
"""

from __future__ import annotations

from bomkeeper.core.bom import load_bom, load_catalog
from bomkeeper.core.registry import build_registry
from bomkeeper.core.discovery import (
    CatalogVersionDiscovery,
    UpgradePolicy,
    VersionDiscoveryService,
)
from bomkeeper.core.prompt import ConsolePromptService, PromptService
from bomkeeper.core.selector import Selection, UpgradeSelector
from bomkeeper.core.resolver import UpgradeResolver

__all__ = [
    "load_bom",
    "load_catalog",
    "build_registry",
    "CatalogVersionDiscovery",
    "UpgradePolicy",
    "VersionDiscoveryService",
    "ConsolePromptService",
    "PromptService",
    "Selection",
    "UpgradeSelector",
    "UpgradeResolver",
]
