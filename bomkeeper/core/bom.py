"""BOM and catalog file loading for bomkeeper.

Both files are TOML. A BOM lists the managed libraries::

    [[library]]
    name = "spring-framework"
    version = "6.1.0"

    [[library]]
    name = "spring-security"
    version = "6.1.0"
    align_with = "spring-framework"
    prohibited = ["6.1.3"]

    [library.metadata]
    group = "org.springframework.security"

A catalog lists every version known to exist for each library and feeds
:class:`~bomkeeper.core.discovery.CatalogVersionDiscovery`::

    [versions]
    spring-framework = ["6.1.1", "6.1.2", "6.2.0"]

All problems are reported as :class:`~bomkeeper.exceptions.BomError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import tomli as tomllib

from bomkeeper.constants import BOM_LIBRARY_TABLE, CATALOG_VERSIONS_TABLE, MAX_FILE_SIZE
from bomkeeper.exceptions import BomError
from bomkeeper.models.library import Library
from bomkeeper.models.version import VersionOption
from bomkeeper.utils.logger import get_logger

logger = get_logger("core.bom")

PathLike = Union[str, Path]

__all__ = ["load_bom", "load_catalog", "parse_bom", "parse_catalog"]

_LIBRARY_KEYS = {"name", "version", "align_with", "prohibited", "metadata"}


def load_bom(path: PathLike) -> List[Library]:
    """Read a BOM file and return its libraries in file order.

    Raises:
        BomError: The file is missing, too large, not valid TOML, or an
            entry is malformed.
    """
    file_path = Path(path)
    libraries = parse_bom(_read_toml(file_path), file_path=str(file_path))
    logger.info("Loaded %d library(ies) from %s", len(libraries), file_path)
    return libraries


def load_catalog(path: PathLike) -> Dict[str, List[str]]:
    """Read a catalog file and return ``name -> known versions``."""
    file_path = Path(path)
    catalog = parse_catalog(_read_toml(file_path), file_path=str(file_path))
    logger.info("Loaded versions of %d library(ies) from %s", len(catalog), file_path)
    return catalog


def parse_bom(data: Mapping[str, Any], *, file_path: str = "<memory>") -> List[Library]:
    """Build libraries from an already parsed BOM document."""
    raw_entries = data.get(BOM_LIBRARY_TABLE, [])
    if not isinstance(raw_entries, list):
        raise BomError(
            f"'{BOM_LIBRARY_TABLE}' must be an array of tables",
            file_path=file_path,
        )

    return [
        _parse_library(raw, index=index, file_path=file_path)
        for index, raw in enumerate(raw_entries)
    ]


def parse_catalog(
    data: Mapping[str, Any],
    *,
    file_path: str = "<memory>",
) -> Dict[str, List[str]]:
    """Build a catalog from an already parsed catalog document."""
    table = data.get(CATALOG_VERSIONS_TABLE, {})
    if not isinstance(table, dict):
        raise BomError(f"'{CATALOG_VERSIONS_TABLE}' must be a table", file_path=file_path)

    catalog: Dict[str, List[str]] = {}
    for name, versions in table.items():
        if not isinstance(versions, list) or not all(isinstance(v, str) for v in versions):
            raise BomError(
                f"Versions of '{name}' must be a list of strings",
                file_path=file_path,
            )
        catalog[name] = list(versions)
    return catalog


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _parse_library(raw: Any, *, index: int, file_path: str) -> Library:
    if not isinstance(raw, dict):
        raise BomError("Library entry must be a table", file_path=file_path, entry=index)

    unknown = set(raw) - _LIBRARY_KEYS
    if unknown:
        raise BomError(
            f"Unknown library keys: {', '.join(sorted(unknown))}",
            file_path=file_path,
            entry=index,
        )

    for key in ("name", "version"):
        value = raw.get(key)
        if not isinstance(value, str) or not value.strip():
            raise BomError(
                f"Library '{key}' must be a non-empty string",
                file_path=file_path,
                entry=index,
            )

    align_with = raw.get("align_with")
    if align_with is not None and not isinstance(align_with, str):
        raise BomError("'align_with' must be a string", file_path=file_path, entry=index)

    prohibited = raw.get("prohibited", [])
    if not isinstance(prohibited, list) or not all(isinstance(v, str) for v in prohibited):
        raise BomError(
            "'prohibited' must be a list of strings",
            file_path=file_path,
            entry=index,
        )

    metadata = raw.get("metadata", {})
    if not isinstance(metadata, dict):
        raise BomError("'metadata' must be a table", file_path=file_path, entry=index)

    return Library(
        name=raw["name"],
        version=VersionOption(raw["version"]),
        align_with=align_with,
        prohibited=tuple(prohibited),
        metadata=metadata,
    )


def _read_toml(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        raise BomError(f"File not found: {path}", file_path=str(path))

    try:
        size = path.stat().st_size
        if size > MAX_FILE_SIZE:
            raise BomError(
                f"File too large ({size} bytes, limit {MAX_FILE_SIZE})",
                file_path=str(path),
            )
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise BomError(f"Invalid TOML in {path.name}: {exc}", file_path=str(path)) from exc
    except OSError as exc:
        raise BomError(f"Cannot read {path}: {exc}", file_path=str(path)) from exc
