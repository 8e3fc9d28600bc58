# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata
as defined by SemVer 2.0.0:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -0alpha
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterable, Optional, Union

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import (
    EmptyVersionError,
    FieldOverflowError,
    InvalidVersionError,
    MalformedVersionError,
    NegativeFieldError,
    NullInputError,
)

logger = logging.getLogger(__name__)

# [0-9] rather than \d: \d also matches non-ASCII digits in str patterns
_NUMERIC = r"0|[1-9][0-9]*"
_PRERELEASE_ID = r"0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*"
_BUILD_ID = r"[0-9a-zA-Z-]+"

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})"
    rf"\.(?P<minor>{_NUMERIC})"
    rf"\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>(?:{_PRERELEASE_ID})(?:\.(?:{_PRERELEASE_ID}))*))?"
    rf"(?:\+(?P<buildmetadata>{_BUILD_ID}(?:\.{_BUILD_ID})*))?"
)

_PRERELEASE_IDENTIFIER = re.compile(_PRERELEASE_ID)
_BUILD_IDENTIFIER = re.compile(_BUILD_ID)

_FIELDS = ("major", "minor", "patch")

Identifiers = Union[str, Iterable[str], None]


def _identifiers(value: Identifiers, pattern: re.Pattern[str], label: str) -> Optional[tuple[str, ...]]:
    """Normalize a dot-joined string or sequence into a validated tuple."""
    if value is None:
        return None
    parts = tuple(value.split(".")) if isinstance(value, str) else tuple(value)
    if not parts:
        return None
    for part in parts:
        if not isinstance(part, str) or pattern.fullmatch(part) is None:
            raise MalformedVersionError(
                ".".join(str(p) for p in parts), f"Invalid {label} identifier: {part!r}"
            )
    return parts


@total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Equality and hashing consider major, minor, patch and prerelease only.
    Build metadata and the original text are kept for display.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1")), or None
        build: Build metadata identifiers (e.g., ("build", "123")), or None
        original_text: Trimmed input text spelling this version; defaults to the
            canonical form
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[tuple[str, ...]] = None
    build: Optional[tuple[str, ...]] = field(default=None, compare=False)
    original_text: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        for name in _FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise NegativeFieldError(name, value)
        object.__setattr__(
            self, "prerelease", _identifiers(self.prerelease, _PRERELEASE_IDENTIFIER, "prerelease")
        )
        object.__setattr__(self, "build", _identifiers(self.build, _BUILD_IDENTIFIER, "build"))
        if not self.original_text:
            object.__setattr__(self, "original_text", self.canonical)
        else:
            object.__setattr__(self, "original_text", self._display_text(self.original_text))

    def _display_text(self, text: str) -> str:
        """Trim text and check that it spells this exact version."""
        if not isinstance(text, str):
            raise TypeError(f"original_text must be a str, got {type(text).__name__}")
        trimmed = text.strip()
        match = SEMVER_PATTERN.fullmatch(trimmed)
        expected = (
            str(self.major),
            str(self.minor),
            str(self.patch),
            self.prerelease_text,
            self.build_text,
        )
        if match is None or match.group(*_FIELDS, "prerelease", "buildmetadata") != expected:
            raise MalformedVersionError(
                text, f"Display text {trimmed!r} does not match version {self.canonical}"
            )
        return trimmed

    @classmethod
    def parse(cls, version_string: str, config: Optional[ParserConfig] = None) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string, config)

    def __str__(self) -> str:
        """Return the display text: the trimmed original input."""
        return self.original_text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import compare_versions

        return compare_versions(self, other) < 0

    @property
    def canonical(self) -> str:
        """Return the version rebuilt from its fields."""
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease_text}"
        if self.build:
            version += f"+{self.build_text}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def has_build(self) -> bool:
        """Return True if this version carries build metadata."""
        return self.build is not None

    @property
    def prerelease_text(self) -> Optional[str]:
        """Return the pre-release identifiers joined with dots."""
        return ".".join(self.prerelease) if self.prerelease else None

    @property
    def build_text(self) -> Optional[str]:
        """Return the build identifiers joined with dots."""
        return ".".join(self.build) if self.build else None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def check_field_width(version: str, field_name: str, value: int, config: ParserConfig) -> None:
    """Raise FieldOverflowError if value does not fit the configured width."""
    limit = config.max_field_value
    if limit is not None and value > limit:
        raise FieldOverflowError(version, field_name, value, config.field_width)


def parse_version(version_string: str, config: Optional[ParserConfig] = None) -> Version:
    """Parse a semantic version string into a Version object.

    Surrounding whitespace is trimmed before matching; the trimmed text is
    kept as the version's display text.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])
        config: Optional parser configuration (field width limits)

    Returns:
        A Version object with parsed components

    Raises:
        NullInputError: If version_string is None
        EmptyVersionError: If the string is empty after trimming
        MalformedVersionError: If the string does not follow semantic versioning
        FieldOverflowError: If a field exceeds the configured width

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None, original_text='1.2.3')

        >>> parse_version(" 2.0.0-rc.1+build.456 ").prerelease
        ('rc', '1')
    """
    if version_string is None:
        raise NullInputError()
    if not isinstance(version_string, str):
        raise MalformedVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    trimmed = version_string.strip()
    if not trimmed:
        raise EmptyVersionError()

    match = SEMVER_PATTERN.fullmatch(trimmed)
    if match is None:
        logger.debug("Rejected version string %r", trimmed)
        raise MalformedVersionError(trimmed)

    config = config or DEFAULT_CONFIG
    numbers = []
    for name in _FIELDS:
        digits = match.group(name)
        try:
            numbers.append(int(digits))
        except ValueError as e:
            # int() refuses digit strings beyond sys.get_int_max_str_digits()
            raise MalformedVersionError(
                trimmed, f"{name.capitalize()} version has too many digits: {len(digits)}"
            ) from e
    for name, value in zip(_FIELDS, numbers):
        check_field_width(trimmed, name, value, config)

    major, minor, patch = numbers
    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=match.group("prerelease"),
        build=match.group("buildmetadata"),
        original_text=trimmed,
    )


def is_valid_semver(version_string: str, config: Optional[ParserConfig] = None) -> bool:
    """Check if a string is a valid semantic version.

    Never raises; any parse failure yields False.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("  1.0.0-alpha  ")
        True
    """
    try:
        parse_version(version_string, config)
    except InvalidVersionError:
        return False
    return True
