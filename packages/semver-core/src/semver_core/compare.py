# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence rules.

Major, minor and patch compare numerically. A release outranks any
pre-release of the same core version. Pre-release identifiers compare
pairwise: numeric identifiers numerically, alphanumeric identifiers by code
point, and numeric identifiers always rank below alphanumeric ones. When all
shared identifiers are equal, the longer pre-release ranks higher.
Build metadata never takes part in precedence.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence, Union

from .errors import InvalidComparisonError
from .semver import Version, parse_version


class Ordering(IntEnum):
    """Three-way comparison result. Compares equal to -1, 0 and 1."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _sign(a, b) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def _numeric_key(identifier: str) -> tuple[int, str]:
    # Numeric identifiers carry no leading zeros, so length orders first
    return (len(identifier), identifier)


def _compare_identifier(id1: str, id2: str) -> Ordering:
    """Compare a single pair of pre-release identifiers."""
    is_num1 = id1.isdigit()
    is_num2 = id2.isdigit()

    if is_num1 and is_num2:
        return _sign(_numeric_key(id1), _numeric_key(id2))
    if is_num1:
        # Numeric < alphanumeric per SemVer
        return Ordering.LESS
    if is_num2:
        return Ordering.GREATER
    return _sign(id1, id2)


def _compare_prerelease(
    pre1: Optional[Sequence[str]], pre2: Optional[Sequence[str]]
) -> Ordering:
    """Compare two pre-release identifier sequences.

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if pre1 is None and pre2 is None:
        return Ordering.EQUAL
    if pre1 is None:
        return Ordering.GREATER
    if pre2 is None:
        return Ordering.LESS

    for id1, id2 in zip(pre1, pre2):
        result = _compare_identifier(id1, id2)
        if result != Ordering.EQUAL:
            return result

    # All compared identifiers equal - longer pre-release has higher precedence
    return _sign(len(pre1), len(pre2))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> Ordering:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1) if version1 < version2,
        Ordering.EQUAL (0) if they have equal precedence,
        Ordering.GREATER (1) if version1 > version2

    Raises:
        InvalidComparisonError: If either version is None
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0-2", "1.0.0-10") == -1
        True
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2") == 0
        True
    """
    if version1 is None or version2 is None:
        raise InvalidComparisonError()

    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result != Ordering.EQUAL:
            return result

    # Compare pre-release (build metadata is ignored)
    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    if version is None:
        raise InvalidComparisonError("Version must not be None")
    v = parse_version(version) if isinstance(version, str) else version

    # Release sorts after every pre-release of the same core: (1,) > (0, ...)
    # Within a pre-release, numeric parts (0, ...) sort before alphanumeric (1, ...)
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease:
            if part.isdigit():
                parts.append((0, _numeric_key(part)))
            else:
                parts.append((1, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
