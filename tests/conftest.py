"""Shared fixtures and test doubles for bomkeeper tests."""

from __future__ import annotations

import os
import logging
from typing import Dict, Generator, List, Mapping, Optional, Sequence, Tuple

import pytest

import bomkeeper.utils.logger as logger_module
from bomkeeper.models import Library, LibraryWithVersionOptions, VersionOption
from bomkeeper.utils.console import reconfigure_console

#: Scripted answer meaning "interrupt the session at this question".
INTERRUPT = object()


class ScriptedPromptService:
    """Prompt double that replays answers and records every question.

    ``answers`` maps a library name to the version string to pick, or to
    :data:`INTERRUPT`. Questions about libraries without an answer get
    the default. Answers are returned as freshly built
    :class:`VersionOption` objects, so equality must be by value.
    """

    def __init__(self, answers: Optional[Mapping[str, object]] = None) -> None:
        self.answers: Dict[str, object] = dict(answers or {})
        self.questions: List[Tuple[str, List[VersionOption], VersionOption]] = []
        self._interrupted = False
        self.resets = 0

    def ask(
        self,
        question: str,
        options: Sequence[VersionOption],
        default: VersionOption,
    ) -> VersionOption:
        self.questions.append((question, list(options), default))
        name = question.split(" ", 1)[0]
        answer = self.answers.get(name)

        if answer is INTERRUPT:
            self._interrupted = True
            return default
        if answer is None:
            return VersionOption(default.version)
        return VersionOption(str(answer))

    def interrupted(self) -> bool:
        return self._interrupted

    def reset(self) -> None:
        self.resets += 1
        self._interrupted = False

    @property
    def asked_names(self) -> List[str]:
        return [question.split(" ", 1)[0] for question, _, _ in self.questions]


class StaticDiscovery:
    """Discovery double returning fixed option lists per library name."""

    def __init__(self, options: Mapping[str, Sequence[str]]) -> None:
        self.options = {name: list(versions) for name, versions in options.items()}
        self.calls: List[Tuple[List[Library], Mapping[str, Library]]] = []

    def find_library_updates(
        self,
        libraries_to_upgrade: Sequence[Library],
        registry: Mapping[str, Library],
    ) -> List[LibraryWithVersionOptions]:
        self.calls.append((list(libraries_to_upgrade), registry))
        return [
            LibraryWithVersionOptions(
                library,
                [VersionOption(v) for v in self.options.get(library.name, [])],
            )
            for library in libraries_to_upgrade
        ]


@pytest.fixture
def lib_a() -> Library:
    return Library("a", "1.0")


@pytest.fixture
def lib_b() -> Library:
    return Library("b", "2.0")


@pytest.fixture
def lib_c() -> Library:
    return Library("c", "3.0")


@pytest.fixture(autouse=True)
def isolate_global_state() -> Generator[None, None, None]:
    """Reset logging, console and NO_COLOR around every test.

    The CLI installs a handler on the ``bomkeeper`` logger with
    propagation disabled, which would hide records from ``caplog``.
    """
    no_color = os.environ.get("NO_COLOR")
    yield

    if no_color is None:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = no_color
    reconfigure_console()

    root_logger = logging.getLogger("bomkeeper")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False
