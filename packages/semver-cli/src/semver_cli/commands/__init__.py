# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import bump, compare, sort, validate

__all__ = ["bump", "compare", "sort", "validate"]
