"""Library registry construction for bomkeeper.

The registry is a read-only ``name -> Library`` lookup built from the full
BOM at the start of every resolution run. It is handed to version
discovery so that a library can be reasoned about relative to others
(for example one that aligns its version with another), and it is never
cached between runs.
"""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping

from bomkeeper.exceptions import ContractViolationError
from bomkeeper.models.library import Library
from bomkeeper.utils.logger import get_logger

logger = get_logger("core.registry")

__all__ = ["build_registry", "find_duplicate_names"]


def find_duplicate_names(libraries: Iterable[Library]) -> List[str]:
    """Return names that occur more than once, in first-seen order."""
    counts = Counter(library.name for library in libraries)
    return [name for name, count in counts.items() if count > 1]


def build_registry(
    libraries: Iterable[Library],
    *,
    allow_duplicates: bool = False,
) -> Mapping[str, Library]:
    """Build a read-only lookup of every library keyed by name.

    Args:
        libraries: The full library collection, including libraries that
            are not being upgraded. May be empty.
        allow_duplicates: When ``True`` a repeated name is logged and the
            last library with that name wins. When ``False`` (default)
            duplicates are rejected.

    Returns:
        An immutable mapping with one entry per distinct name.

    Raises:
        ContractViolationError: Duplicate names and ``allow_duplicates``
            is ``False``.

    Example::

        >>> registry = build_registry([Library("a", "1.0"), Library("b", "2.0")])
        >>> registry["b"].current_version
        '2.0'
    """
    library_list = list(libraries)

    duplicates = find_duplicate_names(library_list)
    if duplicates:
        if not allow_duplicates:
            raise ContractViolationError(
                f"Duplicate library names: {', '.join(duplicates)}",
                expected="unique library names",
                actual=duplicates,
            )
        logger.warning(
            "Duplicate library names %s; the last definition wins",
            ", ".join(duplicates),
        )

    by_name: Dict[str, Library] = {}
    for library in library_list:
        by_name[library.name] = library

    logger.debug("Built registry of %d library(ies)", len(by_name))
    return MappingProxyType(by_name)
