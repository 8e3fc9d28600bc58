# SPDX-License-Identifier: MIT
"""Parser configuration.

Python integers never overflow, so by default version fields are unbounded.
Projects that must agree with a fixed-width implementation can cap the
major/minor/patch fields by setting ``field-width`` in pyproject.toml::

    [tool.semver]
    field-width = 32
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ConfigError

logger = logging.getLogger(__name__)

# Signed widths a field may be limited to
SUPPORTED_FIELD_WIDTHS = frozenset({32, 64})


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for parsing and deriving versions.

    Attributes:
        field_width: Bit width of a signed integer used to bound the
            major, minor and patch fields, or None for arbitrary precision.
            Arbitrary precision still stops at the interpreter's
            int-from-str digit limit (sys.get_int_max_str_digits(), 4300 by
            default); longer fields are rejected as malformed.
    """

    field_width: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.field_width is None:
            return
        if isinstance(self.field_width, bool) or self.field_width not in SUPPORTED_FIELD_WIDTHS:
            raise ConfigError(
                f"Invalid field_width: {self.field_width!r}. "
                f"Must be one of {sorted(SUPPORTED_FIELD_WIDTHS)} or omitted."
            )

    @property
    def max_field_value(self) -> Optional[int]:
        """Largest value a numeric field may hold, or None when unbounded."""
        if self.field_width is None:
            return None
        return 2 ** (self.field_width - 1) - 1

    def fits(self, value: int) -> bool:
        """Check whether a field value is within the configured width."""
        limit = self.max_field_value
        return limit is None or value <= limit

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "ParserConfig":
        """Create ParserConfig from a pyproject.toml file.

        Args:
            pyproject_path: Path to pyproject.toml

        Returns:
            ParserConfig instance

        Raises:
            ConfigError: If the file is not valid TOML or holds bad settings
            FileNotFoundError: If the file does not exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        config = cls.from_pyproject_dict(pyproject)
        logger.debug("Loaded parser configuration from %s: %r", path, config)
        return config

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "ParserConfig":
        """Create ParserConfig from a parsed pyproject.toml dictionary.

        Reads the [tool.semver] table. Missing tables or keys fall back to
        defaults.
        """
        tool_semver = pyproject.get("tool", {}).get("semver", {})
        if not isinstance(tool_semver, dict):
            raise ConfigError("[tool.semver] must be a table")

        unknown = set(tool_semver) - {"field-width"}
        if unknown:
            raise ConfigError(f"Unknown [tool.semver] keys: {', '.join(sorted(unknown))}")

        return cls(field_width=tool_semver.get("field-width"))


DEFAULT_CONFIG = ParserConfig()
