"""Unit tests for bomkeeper.core.prompt.ConsolePromptService."""

from __future__ import annotations

import io
from unittest.mock import patch

import click
import pytest
from rich.console import Console

from bomkeeper.core.prompt import ConsolePromptService
from bomkeeper.models import VersionOption

OPTIONS = [VersionOption("1.0"), VersionOption("1.1"), VersionOption("1.2", "latest")]


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def service(output: io.StringIO) -> ConsolePromptService:
    return ConsolePromptService(Console(file=output, no_color=True, width=120))


@pytest.mark.unit
class TestConsolePromptService:
    """Tests for the terminal prompt."""

    def test_returns_selected_option(self, service: ConsolePromptService) -> None:
        with patch("bomkeeper.core.prompt.click.prompt", return_value=3):
            selected = service.ask("a 1.0", OPTIONS, OPTIONS[0])

        assert selected is OPTIONS[2]
        assert not service.interrupted()

    def test_default_index_passed_to_click(self, service: ConsolePromptService) -> None:
        """Test the default option is preselected (1-based index)."""
        with patch("bomkeeper.core.prompt.click.prompt", return_value=1) as prompt:
            selected = service.ask("a 1.0", OPTIONS, VersionOption("1.0"))

        assert selected == OPTIONS[0]
        assert prompt.call_args.kwargs["default"] == 1
        assert prompt.call_args.kwargs["err"] is True
        choice_type = prompt.call_args.kwargs["type"]
        assert isinstance(choice_type, click.IntRange)
        assert (choice_type.min, choice_type.max) == (1, 3)

    def test_renders_question_and_numbered_options(
        self, service: ConsolePromptService, output: io.StringIO
    ) -> None:
        with patch("bomkeeper.core.prompt.click.prompt", return_value=1):
            service.ask("a 1.0", OPTIONS, OPTIONS[0])

        text = output.getvalue()
        assert "a 1.0" in text
        assert "1) 1.0 (current)" in text
        assert "2) 1.1" in text
        assert "3) 1.2 (latest)" in text

    @pytest.mark.parametrize("error", [click.Abort(), KeyboardInterrupt(), EOFError()])
    def test_interruption_returns_default_and_flags(
        self, service: ConsolePromptService, error: BaseException
    ) -> None:
        with patch("bomkeeper.core.prompt.click.prompt", side_effect=error):
            selected = service.ask("a 1.0", OPTIONS, OPTIONS[0])

        assert selected == OPTIONS[0]
        assert service.interrupted()

    def test_interruption_is_sticky(self, service: ConsolePromptService) -> None:
        """Test later questions are not asked once the session is interrupted."""
        with patch("bomkeeper.core.prompt.click.prompt", side_effect=click.Abort()):
            service.ask("a 1.0", OPTIONS, OPTIONS[0])

        with patch("bomkeeper.core.prompt.click.prompt") as prompt:
            selected = service.ask("b 2.0", [VersionOption("2.0")], VersionOption("2.0"))

        prompt.assert_not_called()
        assert selected == VersionOption("2.0")
        assert service.interrupted()

    def test_reset_clears_interruption(self, service: ConsolePromptService) -> None:
        with patch("bomkeeper.core.prompt.click.prompt", side_effect=click.Abort()):
            service.ask("a 1.0", OPTIONS, OPTIONS[0])

        service.reset()

        assert not service.interrupted()

    def test_empty_options_rejected(self, service: ConsolePromptService) -> None:
        with pytest.raises(ValueError):
            service.ask("a 1.0", [], VersionOption("1.0"))

    def test_default_must_be_offered(self, service: ConsolePromptService) -> None:
        with pytest.raises(ValueError, match="not one of the offered options"):
            service.ask("a 1.0", OPTIONS, VersionOption("9.9"))
