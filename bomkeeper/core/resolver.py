"""Interactive upgrade resolution for bomkeeper.

:class:`UpgradeResolver` is the entry point of the upgrade workflow. For
one call of :meth:`UpgradeResolver.resolve_upgrades` it:

1. builds a fresh library registry from the full BOM and starts a new
   prompt session,
2. runs version discovery once for every library to upgrade,
3. checks that discovery answered for each library, in order,
4. asks the operator about each library in discovery order,
5. returns the accepted upgrades in that same order.

An interrupted prompt session is all-or-nothing: every upgrade accepted
earlier in the same call is discarded and the result is an empty list.
Interruption is never raised to the caller. Errors raised by discovery
propagate unchanged.

Typical usage::

    resolver = UpgradeResolver(ConsolePromptService(), CatalogVersionDiscovery(catalog))
    upgrades = resolver.resolve_upgrades(to_upgrade, bom)
"""

from __future__ import annotations

from typing import List, Mapping, Sequence

from bomkeeper.core.discovery import VersionDiscoveryService
from bomkeeper.core.prompt import PromptService
from bomkeeper.core.registry import build_registry
from bomkeeper.core.selector import UpgradeSelector
from bomkeeper.exceptions import ContractViolationError
from bomkeeper.models.library import Library, LibraryWithVersionOptions
from bomkeeper.models.upgrade import Upgrade
from bomkeeper.utils.logger import get_logger

logger = get_logger("core.resolver")

__all__ = ["UpgradeResolver"]


class UpgradeResolver:
    """Resolves which libraries to upgrade, asking the operator about each.

    Args:
        prompt_service: Interactive prompt used for every question.
        discovery: Finds the version options of each library.
        allow_duplicates: Tolerate duplicate library names in the BOM
            (last one wins) instead of rejecting them.
    """

    def __init__(
        self,
        prompt_service: PromptService,
        discovery: VersionDiscoveryService,
        *,
        allow_duplicates: bool = False,
    ) -> None:
        self.prompt_service = prompt_service
        self.discovery = discovery
        self.allow_duplicates = allow_duplicates
        self._selector = UpgradeSelector(prompt_service)

    def resolve_upgrades(
        self,
        libraries_to_upgrade: Sequence[Library],
        libraries: Sequence[Library],
    ) -> List[Upgrade]:
        """Return the upgrades the operator accepted.

        Args:
            libraries_to_upgrade: Libraries eligible for upgrade, in the
                order they should be presented.
            libraries: Every library of the BOM, including those not being
                upgraded.

        Returns:
            Accepted upgrades in presentation order. Empty when nothing
            was accepted or when the session was interrupted.

        Raises:
            ContractViolationError: Duplicate library names, or discovery
                returned a result that does not match its input.
        """
        registry: Mapping[str, Library] = build_registry(
            libraries, allow_duplicates=self.allow_duplicates
        )
        to_upgrade = list(libraries_to_upgrade)
        self.prompt_service.reset()

        logger.info("Discovering updates for %d library(ies)", len(to_upgrade))
        entries = self.discovery.find_library_updates(to_upgrade, registry)
        _check_discovery_result(to_upgrade, entries)

        upgrades: List[Upgrade] = []
        for entry in entries:
            selection = self._selector.resolve_one_upgrade(entry)

            if selection.cancelled:
                logger.info(
                    "Upgrade selection interrupted at %s; discarding %d accepted upgrade(s)",
                    entry.library.name,
                    len(upgrades),
                )
                return []

            if selection.upgrade is None:
                continue

            logger.info("Accepted upgrade %s", selection.upgrade)
            upgrades.append(selection.upgrade)

        return upgrades


def _check_discovery_result(
    requested: Sequence[Library],
    entries: Sequence[LibraryWithVersionOptions],
) -> None:
    """Ensure discovery answered once per requested library, in order."""
    expected = [library.name for library in requested]
    actual = [entry.library.name for entry in entries]

    if len(actual) != len(expected):
        raise ContractViolationError(
            f"Discovery returned {len(actual)} entries for {len(expected)} libraries",
            expected=expected,
            actual=actual,
        )
    if actual != expected:
        raise ContractViolationError(
            "Discovery returned libraries in a different order than requested",
            expected=expected,
            actual=actual,
        )
