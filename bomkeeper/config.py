"""Configuration file loader for bomkeeper.

Supports two formats:

- ``bomkeeper.toml`` — settings under ``[bomkeeper]`` table
- ``pyproject.toml`` — settings under ``[tool.bomkeeper]`` table

Discovery order:

1. Explicit path from ``--config`` or ``BOMKEEPER_CONFIG``
2. ``bomkeeper.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.bomkeeper]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``bomkeeper.toml``)::

    [bomkeeper]
    upgrade_policy = "same-major"
    allow_duplicate_names = false
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

import tomli as tomllib

from bomkeeper.exceptions import ConfigError
from bomkeeper.utils.logger import get_logger
from bomkeeper.core.discovery import UpgradePolicy
from bomkeeper.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_ALLOW_DUPLICATE_NAMES,
    DEFAULT_UPGRADE_POLICY,
)

logger = get_logger("config")


@dataclass
class BomKeeperConfig:
    """Parsed and validated bomkeeper configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        upgrade_policy: Which newer versions discovery may offer.
        allow_duplicate_names: Tolerate repeated library names in a BOM
            (the last definition wins) instead of failing.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    upgrade_policy: UpgradePolicy = UpgradePolicy(DEFAULT_UPGRADE_POLICY)
    allow_duplicate_names: bool = DEFAULT_ALLOW_DUPLICATE_NAMES

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "upgrade_policy": self.upgrade_policy.value,
            "allow_duplicate_names": self.allow_duplicate_names,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    standalone = cwd / CONFIG_FILE_NAME
    if standalone.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, standalone)
        return standalone

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_bomkeeper_section(pyproject_toml):
        logger.debug("Found [tool.bomkeeper] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_bomkeeper_section(path: Path) -> bool:
    """Check if pyproject.toml contains a ``[tool.bomkeeper]`` section.

    An unreadable or invalid pyproject.toml is treated as "no section";
    it belongs to the project, not to bomkeeper.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    return "bomkeeper" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> BomKeeperConfig:
    """Load and validate bomkeeper configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`BomKeeperConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return BomKeeperConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("bomkeeper", {})
    else:
        section = raw.get("bomkeeper", {})

    if not section:
        logger.debug("Config file found but no bomkeeper section — using defaults")
        return BomKeeperConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> BomKeeperConfig:
    """Validate a ``[bomkeeper]`` / ``[tool.bomkeeper]`` table.

    Raises:
        ConfigError: Unknown keys or values of the wrong type.
    """
    config = BomKeeperConfig()

    known_top = {"upgrade_policy", "allow_duplicate_names"}
    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    if "upgrade_policy" in section:
        val = section["upgrade_policy"]
        if not isinstance(val, str):
            raise ConfigError(
                f"upgrade_policy must be a string, got {type(val).__name__}",
                config_path=config_path,
                option="upgrade_policy",
            )
        try:
            config.upgrade_policy = UpgradePolicy.from_name(val)
        except ValueError as exc:
            raise ConfigError(
                str(exc),
                config_path=config_path,
                option="upgrade_policy",
            ) from exc

    if "allow_duplicate_names" in section:
        val = section["allow_duplicate_names"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"allow_duplicate_names must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="allow_duplicate_names",
            )
        config.allow_duplicate_names = val

    return config
