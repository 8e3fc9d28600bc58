# SPDX-License-Identifier: MIT
"""Command-line interface for semantic version handling."""

from .main import cli, main

__all__ = ["cli", "main"]
