# SPDX-License-Identifier: MIT
"""Derive new versions from existing ones.

Every function returns a new Version and leaves its argument untouched.
Derived versions drop pre-release and build metadata, and their display
text is the canonical MAJOR.MINOR.PATCH form.
"""

from __future__ import annotations

from typing import Optional

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import NegativeFieldError
from .semver import Version, check_field_width


def _release(major: int, minor: int, patch: int, config: Optional[ParserConfig]) -> Version:
    config = config or DEFAULT_CONFIG
    text = f"{major}.{minor}.{patch}"
    for name, value in (("major", major), ("minor", minor), ("patch", patch)):
        check_field_width(text, name, value, config)
    return Version(major, minor, patch)


def _require_non_negative(field: str, value: int) -> None:
    if value < 0:
        raise NegativeFieldError(field, value)


def next_major(version: Version, config: Optional[ParserConfig] = None) -> Version:
    """Increment the major version and reset minor and patch to 0.

    Examples:
        >>> str(next_major(Version(1, 2, 3, prerelease="alpha.1", build="build.1")))
        '2.0.0'
    """
    return _release(version.major + 1, 0, 0, config)


def next_minor(version: Version, config: Optional[ParserConfig] = None) -> Version:
    """Increment the minor version and reset patch to 0."""
    return _release(version.major, version.minor + 1, 0, config)


def next_patch(version: Version, config: Optional[ParserConfig] = None) -> Version:
    """Increment the patch version."""
    return _release(version.major, version.minor, version.patch + 1, config)


def with_major(version: Version, major: int, config: Optional[ParserConfig] = None) -> Version:
    """Set the major version and reset minor and patch to 0.

    Raises:
        NegativeFieldError: If major is negative
    """
    _require_non_negative("major", major)
    return _release(major, 0, 0, config)


def with_minor(version: Version, minor: int, config: Optional[ParserConfig] = None) -> Version:
    """Set the minor version, keep major, and reset patch to 0.

    Raises:
        NegativeFieldError: If minor is negative
    """
    _require_non_negative("minor", minor)
    return _release(version.major, minor, 0, config)


def with_patch(version: Version, patch: int, config: Optional[ParserConfig] = None) -> Version:
    """Set the patch version, keeping major and minor.

    Raises:
        NegativeFieldError: If patch is negative
    """
    _require_non_negative("patch", patch)
    return _release(version.major, version.minor, patch, config)
