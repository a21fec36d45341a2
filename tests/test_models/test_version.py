"""Unit tests for bomkeeper.models.version."""

from __future__ import annotations

import pytest

from bomkeeper.models.version import VersionOption


@pytest.mark.unit
class TestVersionOption:
    """Tests for VersionOption value semantics."""

    def test_equal_when_versions_equal(self) -> None:
        """Test two separately built options with the same version are equal."""
        assert VersionOption("1.0") == VersionOption("1.0")
        assert VersionOption("1.0") is not VersionOption("1.0")

    def test_note_ignored_by_equality_and_hash(self) -> None:
        """Test the display note does not affect equality or hashing."""
        plain = VersionOption("6.1.2")
        noted = VersionOption("6.1.2", "aligned with core 6.1.2")

        assert plain == noted
        assert hash(plain) == hash(noted)
        assert len({plain, noted}) == 1

    def test_different_versions_not_equal(self) -> None:
        assert VersionOption("1.0") != VersionOption("1.0.1")

    def test_is_immutable(self) -> None:
        """Test attributes cannot be reassigned."""
        option = VersionOption("1.0")

        with pytest.raises(AttributeError):
            option.version = "2.0"  # type: ignore[misc]

    @pytest.mark.parametrize("bad", ["", "   "])
    def test_rejects_empty_version(self, bad: str) -> None:
        with pytest.raises(ValueError):
            VersionOption(bad)

    def test_strips_whitespace(self) -> None:
        assert VersionOption(" 1.2 ").version == "1.2"

    def test_str_without_note(self) -> None:
        assert str(VersionOption("1.2")) == "1.2"

    def test_str_with_note(self) -> None:
        assert str(VersionOption("1.2", "aligned with x 1.2")) == "1.2 (aligned with x 1.2)"

    def test_with_note_returns_equal_option(self) -> None:
        option = VersionOption("1.2")
        noted = option.with_note("hello")

        assert noted == option
        assert noted.note == "hello"
        assert option.note is None
