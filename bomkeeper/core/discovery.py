"""Version discovery for bomkeeper.

Discovery answers "which newer versions could this library move to?" for
a batch of libraries. The resolver only depends on the
:class:`VersionDiscoveryService` protocol; :class:`CatalogVersionDiscovery`
is the offline implementation shipped with bomkeeper. It reads the known
versions of each library from a catalog (usually loaded from
``catalog.toml``) and never touches the network.

Candidate selection rules:

1. **Newer only** — a candidate must be strictly greater than the current
   version under PEP 440 ordering.
2. **Stable unless already pre-release** — pre-releases are offered only
   when the current version is itself a pre-release.
3. **Upgrade policy** — ``any``, ``same-major`` or ``same-minor``.
4. **Prohibited versions** — versions listed on the library are skipped.
5. **Alignment** — a library that aligns with another library is offered
   exactly that library's version when it is a valid candidate.

Typical usage::

    discovery = CatalogVersionDiscovery(load_catalog(path), UpgradePolicy.SAME_MAJOR)
    entries = discovery.find_library_updates(to_upgrade, registry)
"""

from __future__ import annotations

import enum
from typing import Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

from packaging.version import Version

from bomkeeper.models.library import Library, LibraryWithVersionOptions
from bomkeeper.models.version import VersionOption
from bomkeeper.utils.logger import get_logger
from bomkeeper.utils.version_utils import parse_version, release_segment

logger = get_logger("core.discovery")

__all__ = [
    "UpgradePolicy",
    "VersionDiscoveryService",
    "CatalogVersionDiscovery",
]


class UpgradePolicy(str, enum.Enum):
    """Which newer versions discovery may offer."""

    ANY = "any"
    SAME_MAJOR = "same-major"
    SAME_MINOR = "same-minor"

    @classmethod
    def from_name(cls, name: str) -> "UpgradePolicy":
        """Look up a policy by its configuration name.

        Raises:
            ValueError: ``name`` is not a known policy.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            known = ", ".join(policy.value for policy in cls)
            raise ValueError(
                f"Unknown upgrade policy {name!r} (expected one of: {known})"
            ) from None

    def permits(self, current: Version, candidate: Version) -> bool:
        if self is UpgradePolicy.ANY:
            return True
        current_major, current_minor, _ = release_segment(current)
        candidate_major, candidate_minor, _ = release_segment(candidate)
        if self is UpgradePolicy.SAME_MAJOR:
            return candidate_major == current_major
        return (candidate_major, candidate_minor) == (current_major, current_minor)


class VersionDiscoveryService(Protocol):
    """Finds the viable version options for a batch of libraries.

    Implementations must return exactly one entry per library in
    ``libraries_to_upgrade``, in the same order. An empty option list is a
    normal "no upgrade available" answer, not an error.
    """

    def find_library_updates(
        self,
        libraries_to_upgrade: Sequence[Library],
        registry: Mapping[str, Library],
    ) -> List[LibraryWithVersionOptions]:
        ...


class CatalogVersionDiscovery:
    """Discovery backed by an in-memory catalog of known versions.

    Args:
        catalog: Library name -> every version known to exist, in any
            order. Libraries missing from the catalog have no options.
        policy: Upgrade policy applied to every library.
    """

    def __init__(
        self,
        catalog: Mapping[str, Sequence[str]],
        policy: UpgradePolicy = UpgradePolicy.ANY,
    ) -> None:
        self._catalog: Dict[str, List[str]] = {
            name: list(versions) for name, versions in catalog.items()
        }
        self.policy = policy

    def find_library_updates(
        self,
        libraries_to_upgrade: Sequence[Library],
        registry: Mapping[str, Library],
    ) -> List[LibraryWithVersionOptions]:
        results: List[LibraryWithVersionOptions] = []
        for library in libraries_to_upgrade:
            options = self.version_options(library, registry)
            logger.debug(
                "%s: %d version option(s) under policy %s",
                library,
                len(options),
                self.policy.value,
            )
            results.append(LibraryWithVersionOptions(library, options))
        return results

    def version_options(
        self,
        library: Library,
        registry: Mapping[str, Library],
    ) -> List[VersionOption]:
        """Return the ordered (oldest first) options for one library."""
        candidates = self._candidates(library)

        aligned = self._aligned_option(library, registry, candidates)
        if aligned is not None:
            return [aligned]

        return [VersionOption(raw) for raw, _ in candidates]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _candidates(self, library: Library) -> List[Tuple[str, Version]]:
        current = parse_version(library.current_version)
        if current is None:
            logger.warning(
                "Cannot parse current version %r of %s; no options offered",
                library.current_version,
                library.name,
            )
            return []

        seen = set()
        candidates = []
        for raw in self._catalog.get(library.name, []):
            parsed = parse_version(raw)
            if parsed is None:
                logger.debug("Skipping unparseable version %r of %s", raw, library.name)
                continue
            if parsed in seen or parsed <= current:
                continue
            if parsed.is_prerelease and not current.is_prerelease:
                continue
            if library.is_prohibited(raw):
                logger.debug("Skipping prohibited version %s of %s", raw, library.name)
                continue
            if not self.policy.permits(current, parsed):
                continue
            seen.add(parsed)
            candidates.append((raw, parsed))

        candidates.sort(key=lambda pair: pair[1])
        return candidates

    def _aligned_option(
        self,
        library: Library,
        registry: Mapping[str, Library],
        candidates: List[Tuple[str, Version]],
    ) -> Optional[VersionOption]:
        if not library.align_with:
            return None

        target = registry.get(library.align_with)
        if target is None:
            logger.warning(
                "%s aligns with %s, which is not in the BOM",
                library.name,
                library.align_with,
            )
            return None

        target_version = parse_version(target.current_version)
        for raw, parsed in candidates:
            if parsed == target_version:
                return VersionOption(raw).with_note(f"aligned with {target.name} {raw}")

        if target.current_version == library.current_version:
            logger.debug("%s is already aligned with %s", library.name, target.name)
            return None

        logger.warning(
            "%s aligns with %s %s, which is not an available upgrade",
            library.name,
            target.name,
            target.current_version,
        )
        return None
