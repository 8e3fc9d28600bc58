# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from semver_core import ParserConfig


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory holding a pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        if (current / "pyproject.toml").is_file():
            return current
        if current == current.parent:
            return None
        current = current.parent


def load_config(
    project_dir: Optional[str | Path] = None,
    field_width: Optional[int] = None,
) -> ParserConfig:
    """Load parser configuration for a CLI invocation.

    A field width given on the command line wins outright and no file is
    read. Otherwise [tool.semver] is read from the project's pyproject.toml
    when one is found.

    Args:
        project_dir: Project directory (defaults to finding project root)
        field_width: Field width override from the command line

    Returns:
        ParserConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if field_width is not None:
        return ParserConfig(field_width=field_width)

    root = find_project_root(project_dir)
    if root is None:
        return ParserConfig()
    return ParserConfig.from_pyproject(root / "pyproject.toml")

