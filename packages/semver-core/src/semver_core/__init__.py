# SPDX-License-Identifier: MIT
"""Semantic version parsing, precedence comparison and derivation.

This package provides utilities for parsing, validating, comparing and
deriving semantic versions following the SemVer 2.0.0 specification.

Example:
    >>> from semver_core import parse_version, compare_versions, sort_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> compare_versions("1.0.0-alpha", "1.0.0") == -1
    True
    >>> sort_versions(["1.0.0-beta.2", "1.0.0-beta.11", "1.0.0"])
    ['1.0.0', '1.0.0-beta.11', '1.0.0-beta.2']
"""

__version__ = "0.1.0"

from .errors import (
    SemVerError,
    InvalidVersionError,
    NullInputError,
    MalformedVersionError,
    EmptyVersionError,
    FieldOverflowError,
    InvalidComparisonError,
    NegativeFieldError,
    EmptyInputError,
    ConfigError,
)
from .config import ParserConfig, DEFAULT_CONFIG
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    Ordering,
    compare_versions,
    version_key,
)
from .bump import (
    next_major,
    next_minor,
    next_patch,
    with_major,
    with_minor,
    with_patch,
)
from .sorting import (
    sort_versions,
    find_highest_version,
)

__all__ = [
    # Errors
    "SemVerError",
    "InvalidVersionError",
    "NullInputError",
    "MalformedVersionError",
    "EmptyVersionError",
    "FieldOverflowError",
    "InvalidComparisonError",
    "NegativeFieldError",
    "EmptyInputError",
    "ConfigError",
    # Configuration
    "ParserConfig",
    "DEFAULT_CONFIG",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "Ordering",
    "compare_versions",
    "version_key",
    # Derivation
    "next_major",
    "next_minor",
    "next_patch",
    "with_major",
    "with_minor",
    "with_patch",
    # Collections
    "sort_versions",
    "find_highest_version",
]
