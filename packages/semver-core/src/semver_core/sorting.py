# SPDX-License-Identifier: MIT
"""Sorting and selecting from collections of version strings."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from .compare import version_key
from .config import ParserConfig
from .errors import EmptyInputError, NullInputError
from .semver import Version, parse_version

logger = logging.getLogger(__name__)


def sort_versions(
    versions: Iterable[Union[str, Version]],
    config: Optional[ParserConfig] = None,
) -> list[str]:
    """Sort versions from highest to lowest precedence.

    Every entry is parsed before anything is sorted, so a single invalid entry
    fails the whole call. The sort is stable: versions of equal precedence
    (e.g. differing only in build metadata) keep their input order.

    Args:
        versions: Version strings or Version objects
        config: Optional parser configuration

    Returns:
        The display text of each version, highest first

    Raises:
        NullInputError: If versions is None or contains None
        InvalidVersionError: If any entry is not a valid version

    Examples:
        >>> sort_versions(["1.0.0", "2.0.0", "1.0.0-rc.1"])
        ['2.0.0', '1.0.0', '1.0.0-rc.1']
    """
    if versions is None:
        raise NullInputError("Versions list cannot be None")

    parsed = [v if isinstance(v, Version) else parse_version(v, config) for v in versions]
    # reverse=True keeps equal elements in their original order
    parsed.sort(key=version_key, reverse=True)
    logger.debug("Sorted %d versions", len(parsed))
    return [str(v) for v in parsed]


def find_highest_version(
    versions: Optional[Iterable[Union[str, Version]]],
    config: Optional[ParserConfig] = None,
) -> str:
    """Return the display text of the highest version.

    When several versions share the highest precedence, the first of them in
    input order wins.

    Raises:
        EmptyInputError: If versions is None or empty
        InvalidVersionError: If any entry is not a valid version
    """
    if versions is None:
        raise EmptyInputError()
    ordered = sort_versions(list(versions), config)
    if not ordered:
        raise EmptyInputError()
    return ordered[0]
