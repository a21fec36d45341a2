"""
Centralized constants for bomkeeper.

This module defines immutable configuration values used across bomkeeper,
including file names, policy names, and logging formats. All values are
intended to be treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

#: Standalone configuration file name.
CONFIG_FILE_NAME: Final[str] = "bomkeeper.toml"

#: Default bill-of-materials file name.
DEFAULT_BOM_FILE: Final[str] = "bom.toml"

#: Default catalog (known versions) file name.
DEFAULT_CATALOG_FILE: Final[str] = "catalog.toml"

#: Top-level array of tables holding BOM libraries.
BOM_LIBRARY_TABLE: Final[str] = "library"

#: Top-level table holding catalog versions.
CATALOG_VERSIONS_TABLE: Final[str] = "versions"

# ---------------------------------------------------------------------------
# Upgrade policies
# ---------------------------------------------------------------------------

#: Names accepted for ``upgrade_policy`` / ``--policy``.
UPGRADE_POLICY_NAMES: Final[Sequence[str]] = ("any", "same-major", "same-minor")

#: Default upgrade policy.
DEFAULT_UPGRADE_POLICY: Final[str] = "any"

#: Whether duplicate library names are tolerated (last one wins).
DEFAULT_ALLOW_DUPLICATE_NAMES: Final[bool] = False

# ---------------------------------------------------------------------------
# Security constraints
# ---------------------------------------------------------------------------

#: Maximum allowed file size (in bytes) when reading BOM and catalog files.
MAX_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10 MB

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
