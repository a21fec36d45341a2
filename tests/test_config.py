from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from bomkeeper.config import (
    BomKeeperConfig,
    discover_config_file,
    load_config,
    _parse_section,
    _pyproject_has_bomkeeper_section,
    _read_toml,
)
from bomkeeper.core.discovery import UpgradePolicy
from bomkeeper.exceptions import ConfigError


@pytest.mark.unit
class TestBomKeeperConfig:
    """Tests for BomKeeperConfig dataclass."""

    def test_defaults(self) -> None:
        config = BomKeeperConfig()

        assert config.upgrade_policy is UpgradePolicy.ANY
        assert config.allow_duplicate_names is False
        assert config.source_path is None

    def test_to_log_dict_omits_source_path(self) -> None:
        config = BomKeeperConfig(
            upgrade_policy=UpgradePolicy.SAME_MAJOR,
            allow_duplicate_names=True,
            source_path=Path("/etc/bomkeeper.toml"),
        )

        assert config.to_log_dict() == {
            "upgrade_policy": "same-major",
            "allow_duplicate_names": True,
        }


@pytest.mark.unit
class TestDiscoverConfigFile:
    """Tests for discover_config_file lookup order."""

    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        explicit = tmp_path / "custom.toml"
        explicit.write_text("[bomkeeper]\n", encoding="utf-8")
        (tmp_path / "bomkeeper.toml").write_text("[bomkeeper]\n", encoding="utf-8")

        with patch("bomkeeper.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file(explicit) == explicit.resolve()

    def test_missing_explicit_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            discover_config_file(tmp_path / "missing.toml")

    def test_standalone_before_pyproject(self, tmp_path: Path) -> None:
        standalone = tmp_path / "bomkeeper.toml"
        standalone.write_text("[bomkeeper]\n", encoding="utf-8")
        (tmp_path / "pyproject.toml").write_text("[tool.bomkeeper]\n", encoding="utf-8")

        with patch("bomkeeper.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() == standalone

    def test_pyproject_with_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[tool.bomkeeper]\nupgrade_policy = "same-minor"\n', encoding="utf-8"
        )

        with patch("bomkeeper.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() == pyproject

    def test_pyproject_without_section_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.black]\n", encoding="utf-8")

        with patch("bomkeeper.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() is None


@pytest.mark.unit
class TestPyprojectHasBomkeeperSection:
    def test_present(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.bomkeeper]\n", encoding="utf-8")

        assert _pyproject_has_bomkeeper_section(path) is True

    def test_invalid_or_missing_file_is_false(self, tmp_path: Path) -> None:
        broken = tmp_path / "pyproject.toml"
        broken.write_text("not ][ toml", encoding="utf-8")

        assert _pyproject_has_bomkeeper_section(broken) is False
        assert _pyproject_has_bomkeeper_section(tmp_path / "absent.toml") is False


@pytest.mark.unit
class TestReadToml:
    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[bomkeeper\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid TOML") as exc_info:
            _read_toml(path)

        assert exc_info.value.config_path == str(path)

    def test_unreadable_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            _read_toml(tmp_path / "missing.toml")


@pytest.mark.unit
class TestParseSection:
    """Tests for _parse_section validation."""

    def test_empty_section_gives_defaults(self) -> None:
        config = _parse_section({}, config_path="bomkeeper.toml")

        assert config.upgrade_policy is UpgradePolicy.ANY
        assert config.allow_duplicate_names is False

    def test_all_options(self) -> None:
        config = _parse_section(
            {"upgrade_policy": "same-minor", "allow_duplicate_names": True},
            config_path="bomkeeper.toml",
        )

        assert config.upgrade_policy is UpgradePolicy.SAME_MINOR
        assert config.allow_duplicate_names is True

    def test_unknown_keys(self) -> None:
        with pytest.raises(ConfigError, match="Unknown configuration keys: color, retries"):
            _parse_section(
                {"retries": 3, "color": True}, config_path="bomkeeper.toml"
            )

    def test_unknown_policy(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            _parse_section({"upgrade_policy": "latest"}, config_path="bomkeeper.toml")

        assert exc_info.value.option == "upgrade_policy"

    @pytest.mark.parametrize(
        "section,option",
        [
            ({"upgrade_policy": 1}, "upgrade_policy"),
            ({"allow_duplicate_names": "yes"}, "allow_duplicate_names"),
        ],
    )
    def test_wrong_types(self, section: dict, option: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            _parse_section(section, config_path="bomkeeper.toml")

        assert exc_info.value.option == option


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config end to end."""

    def test_no_file_gives_defaults(self, tmp_path: Path) -> None:
        with patch("bomkeeper.config.Path.cwd", return_value=tmp_path):
            config = load_config()

        assert config == BomKeeperConfig()

    def test_standalone_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bomkeeper.toml"
        path.write_text(
            '[bomkeeper]\nupgrade_policy = "same-major"\nallow_duplicate_names = true\n',
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.upgrade_policy is UpgradePolicy.SAME_MAJOR
        assert config.allow_duplicate_names is True
        assert config.source_path == path.resolve()

    def test_pyproject_file(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[project]\nname = "x"\n\n[tool.bomkeeper]\nupgrade_policy = "same-minor"\n',
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.upgrade_policy is UpgradePolicy.SAME_MINOR

    def test_file_without_section(self, tmp_path: Path) -> None:
        path = tmp_path / "bomkeeper.toml"
        path.write_text("# nothing here\n", encoding="utf-8")

        config = load_config(path)

        assert config.upgrade_policy is UpgradePolicy.ANY
        assert config.source_path == path.resolve()

    def test_invalid_value_propagates(self, tmp_path: Path) -> None:
        path = tmp_path / "bomkeeper.toml"
        path.write_text('[bomkeeper]\nupgrade_policy = "newest"\n', encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(path)
