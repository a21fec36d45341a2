"""Interactive prompt services for bomkeeper.

The selector asks the operator one question per library through a
:class:`PromptService`. The protocol has three operations: a blocking
:meth:`~PromptService.ask` and an :meth:`~PromptService.interrupted` query
that the caller checks right after each answer, plus :meth:`~PromptService.reset`
which the resolver calls at the start of every session. Interruption is
observed, never raised, so an abort in the middle of a session cannot unwind
through unrelated code.

:class:`ConsolePromptService` is the terminal implementation used by the
CLI. Tests use scripted doubles that satisfy the same protocol.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

import click
from rich.console import Console
from rich.markup import escape

from bomkeeper.models.version import VersionOption
from bomkeeper.utils.console import get_err_console
from bomkeeper.utils.logger import get_logger

logger = get_logger("core.prompt")

__all__ = ["PromptService", "ConsolePromptService"]


class PromptService(Protocol):
    """Asks the operator to choose one of several version options."""

    def ask(
        self,
        question: str,
        options: Sequence[VersionOption],
        default: VersionOption,
    ) -> VersionOption:
        """Block until the operator picks an option and return it.

        When the session is interrupted implementations return ``default``
        and report the interruption through :meth:`interrupted`.
        """
        ...

    def interrupted(self) -> bool:
        """Return ``True`` if the session has been interrupted."""
        ...

    def reset(self) -> None:
        """Start a new session, forgetting any earlier interruption."""
        ...


class ConsolePromptService:
    """Numbered-menu prompt on the terminal.

    Options are printed with Rich and the choice is read with
    :func:`click.prompt`, both on stderr, leaving stdout to the command
    output. Pressing Enter accepts the default. Ctrl+C or end-of-input
    interrupts the session; the interruption is sticky, so later
    :meth:`ask` calls return their default without prompting until
    :meth:`reset` starts the next session.

    Args:
        console: Rich console to render on. Defaults to the shared
            stderr console.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console
        self._interrupted = False

    @property
    def console(self) -> Console:
        return self._console or get_err_console()

    def ask(
        self,
        question: str,
        options: Sequence[VersionOption],
        default: VersionOption,
    ) -> VersionOption:
        if not options:
            raise ValueError("At least one option is required")

        if self._interrupted:
            return default

        default_index = _index_of(options, default)

        self.console.print(f"\n[bold magenta]{escape(question)}[/bold magenta]")
        for number, option in enumerate(options, start=1):
            line = f"  [bold cyan]{number}[/bold cyan]) {escape(str(option))}"
            if option == default:
                line += " [dim](current)[/dim]"
            self.console.print(line)

        try:
            choice = click.prompt(
                "Select version",
                type=click.IntRange(1, len(options)),
                default=default_index + 1,
                show_default=True,
                err=True,
            )
        except (click.Abort, KeyboardInterrupt, EOFError):
            self.console.print()
            logger.debug("Prompt interrupted while asking %r", question)
            self._interrupted = True
            return default

        return options[choice - 1]

    def interrupted(self) -> bool:
        return self._interrupted

    def reset(self) -> None:
        """Clear a previous interruption so the service can be reused."""
        self._interrupted = False


def _index_of(options: Sequence[VersionOption], default: VersionOption) -> int:
    for index, option in enumerate(options):
        if option == default:
            return index
    raise ValueError(f"Default option {default} is not one of the offered options")
