# SPDX-License-Identifier: MIT
"""Exception hierarchy for semantic version handling.

Every error raised by this package derives from :class:`SemVerError`.
Parse failures additionally derive from :class:`InvalidVersionError` so callers
can treat "this text is not a version" uniformly.
"""

from __future__ import annotations

from typing import Optional


class SemVerError(Exception):
    """Base class for all semantic version errors."""

    pass


class InvalidVersionError(SemVerError, ValueError):
    """Raised when input cannot be parsed as a semantic version."""

    def __init__(self, version: Optional[str], message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class NullInputError(InvalidVersionError, TypeError):
    """Raised when ``None`` is given where version text is required."""

    def __init__(self, message: str = "Version string cannot be None"):
        super().__init__(None, message)


class MalformedVersionError(InvalidVersionError):
    """Raised when trimmed input does not match the SemVer grammar."""

    pass


class EmptyVersionError(MalformedVersionError):
    """Raised when the input is empty after trimming whitespace."""

    def __init__(self) -> None:
        super().__init__("", "Version string cannot be empty")


class FieldOverflowError(MalformedVersionError):
    """Raised when a numeric field exceeds the configured fixed width."""

    def __init__(self, version: str, field: str, value: int, width: int):
        self.field = field
        self.value = value
        self.width = width
        super().__init__(
            version, f"{field.capitalize()} version exceeds {width}-bit limit: {value}"
        )


class InvalidComparisonError(SemVerError, TypeError):
    """Raised when a comparison operand is missing."""

    def __init__(self, message: str = "Versions must not be None"):
        super().__init__(message)


class NegativeFieldError(SemVerError, ValueError):
    """Raised when a version field would be set to a negative number."""

    def __init__(self, field: str, value: int):
        self.field = field
        self.value = value
        super().__init__(f"{field.capitalize()} version cannot be negative: {value}")


class EmptyInputError(SemVerError, ValueError):
    """Raised when a collection operation receives no versions."""

    def __init__(self, message: str = "Versions list cannot be None or empty"):
        super().__init__(message)


class ConfigError(SemVerError):
    """Raised when parser configuration is invalid."""

    pass
