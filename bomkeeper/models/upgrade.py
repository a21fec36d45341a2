"""
Upgrade data model for bomkeeper.

An :class:`Upgrade` records an operator's confirmed decision to move a
library from its current version to a specific new version. Upgrades are
only ever produced for a choice other than the current version.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from bomkeeper.models.library import Library
from bomkeeper.models.version import VersionOption
from bomkeeper.utils.version_utils import get_update_type


@dataclass(frozen=True)
class Upgrade:
    """A confirmed upgrade of ``library`` to version ``to``.

    Attributes:
        library: The BOM library being upgraded.
        to: The accepted target version.
    """

    library: Library
    to: VersionOption

    def __post_init__(self) -> None:
        if isinstance(self.to, str):
            object.__setattr__(self, "to", VersionOption(self.to))

    @property
    def name(self) -> str:
        return self.library.name

    @property
    def from_version(self) -> str:
        return self.library.current_version

    @property
    def to_version(self) -> str:
        return self.to.version

    @property
    def update_type(self) -> str:
        """Classification of the change (``major``, ``minor``, ``patch``...)."""
        return get_update_type(self.from_version, self.to_version)

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "name": self.name,
            "from": self.from_version,
            "to": self.to_version,
            "update_type": self.update_type,
        }

    def __str__(self) -> str:
        return f"{self.name} {self.from_version} -> {self.to_version}"
