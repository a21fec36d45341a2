"""Per-library upgrade selection for bomkeeper.

:class:`UpgradeSelector` turns one :class:`LibraryWithVersionOptions` into
a :class:`Selection`:

- no version options: *keep*, and the operator is never asked;
- operator picks the current version: *keep*;
- operator picks anything else: *upgrade* to that option;
- the prompt session was interrupted: *cancelled*.

Cancellation is a value, not an exception, so the resolver can apply its
discard-everything policy explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from bomkeeper.core.prompt import PromptService
from bomkeeper.models.library import LibraryWithVersionOptions
from bomkeeper.models.upgrade import Upgrade
from bomkeeper.models.version import VersionOption
from bomkeeper.utils.logger import get_logger

logger = get_logger("core.selector")

__all__ = ["Selection", "UpgradeSelector", "offered_options", "question_for"]


@dataclass(frozen=True)
class Selection:
    """Outcome of asking about one library.

    Build instances with :meth:`keep`, :meth:`upgrade_to` or :meth:`cancel`.
    """

    upgrade: Optional[Upgrade] = None
    cancelled: bool = False

    @classmethod
    def keep(cls) -> "Selection":
        return cls()

    @classmethod
    def upgrade_to(cls, upgrade: Upgrade) -> "Selection":
        return cls(upgrade=upgrade)

    @classmethod
    def cancel(cls) -> "Selection":
        return cls(cancelled=True)

    @property
    def is_upgrade(self) -> bool:
        return self.upgrade is not None


def question_for(entry: LibraryWithVersionOptions) -> str:
    """Return the question label, ``"<name> <current version>"``."""
    return f"{entry.library.name} {entry.library.current_version}"


def offered_options(entry: LibraryWithVersionOptions) -> List[VersionOption]:
    """Return the choices shown to the operator, current version first.

    Example::

        >>> entry = LibraryWithVersionOptions(
        ...     Library("a", "1.0"), [VersionOption("1.1"), VersionOption("1.2")]
        ... )
        >>> [o.version for o in offered_options(entry)]
        ['1.0', '1.1', '1.2']
    """
    return [VersionOption(entry.library.current_version), *entry.version_options]


class UpgradeSelector:
    """Asks the operator to choose a version for one library at a time.

    Args:
        prompt_service: Where questions are asked.
    """

    def __init__(self, prompt_service: PromptService) -> None:
        self.prompt_service = prompt_service

    def resolve_one_upgrade(self, entry: LibraryWithVersionOptions) -> Selection:
        if not entry.version_options:
            logger.debug("No version options for %s; not asking", entry.library.name)
            return Selection.keep()

        options = offered_options(entry)
        default = options[0]

        selected = self.prompt_service.ask(question_for(entry), options, default)

        if self.prompt_service.interrupted():
            return Selection.cancel()

        # Value equality: the prompt may hand back a rebuilt option
        if selected == default:
            logger.debug("Keeping %s at %s", entry.library.name, default.version)
            return Selection.keep()

        return Selection.upgrade_to(Upgrade(entry.library, selected))
