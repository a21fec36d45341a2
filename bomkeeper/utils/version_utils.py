"""
Version helpers for bomkeeper.

Thin wrappers around :mod:`packaging.version` used by discovery (ordering
and policy filtering) and by reporting (classifying an upgrade as major,
minor or patch).
"""

from __future__ import annotations

from typing import Optional, Tuple

from packaging.version import InvalidVersion, Version


def parse_version(value: Optional[str]) -> Optional[Version]:
    """Parse a PEP 440 version string, returning ``None`` when invalid.

    Examples:
        >>> parse_version("1.2.3")
        <Version('1.2.3')>
        >>> parse_version("not-a-version") is None
        True
    """
    if not value:
        return None
    try:
        return Version(value)
    except InvalidVersion:
        return None


def release_segment(version: Version) -> Tuple[int, int, int]:
    """Return ``(major, minor, patch)``, padding short releases with zeros."""
    release = version.release
    major = release[0] if len(release) > 0 else 0
    minor = release[1] if len(release) > 1 else 0
    patch = release[2] if len(release) > 2 else 0
    return major, minor, patch


def get_update_type(
    current_version: Optional[str],
    target_version: Optional[str],
) -> str:
    """Classify the move from ``current_version`` to ``target_version``.

    Returns:
        ``"major"``, ``"minor"`` or ``"patch"`` for release changes,
        ``"update"`` when only pre/post/dev segments differ, ``"same"``,
        ``"downgrade"``, or ``"unknown"`` when either side is missing or
        unparseable.

    Examples:
        >>> get_update_type("1.0.0", "2.0.0")
        'major'
        >>> get_update_type("1.2", "1.2.1")
        'patch'
        >>> get_update_type("1.0", "banana")
        'unknown'
    """
    current = parse_version(current_version)
    target = parse_version(target_version)

    if current is None or target is None:
        return "unknown"
    if target == current:
        return "same"
    if target < current:
        return "downgrade"

    current_major, current_minor, current_patch = release_segment(current)
    target_major, target_minor, target_patch = release_segment(target)

    if current_major != target_major:
        return "major"
    if current_minor != target_minor:
        return "minor"
    if current_patch != target_patch:
        return "patch"

    # Pre-release -> release, post releases and the like
    return "update"
