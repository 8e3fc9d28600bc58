# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from semver_core import ConfigError, ParserConfig, SemVerError, __version__

from .config import load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[ParserConfig] = None
        self.project_dir: Optional[Path] = None
        self.field_width: Optional[int] = None

    def load_config(self) -> ParserConfig:
        """Load configuration, caching the result.

        Errors in a pyproject.toml found by searching upward only warn.
        With -C they are fatal.
        """
        if self.config is None:
            try:
                self.config = load_config(self.project_dir, self.field_width)
            except ConfigError as e:
                if self.project_dir is not None:
                    raise
                echo_warning(f"Ignoring pyproject.toml settings: {e}")
                self.config = ParserConfig()
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def read_versions(versions: tuple[str, ...]) -> list[str]:
    """Return command-line versions, or non-blank stdin lines when none are given."""
    if versions:
        return list(versions)
    stdin = click.get_text_stream("stdin")
    return [line for line in stdin.read().splitlines() if line.strip()]


@click.group()
@click.version_option(version=__version__, prog_name="semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [tool.semver] settings from this directory's pyproject.toml.",
)
@click.option(
    "--field-width",
    type=click.Choice(["32", "64"]),
    help="Limit major/minor/patch to a signed integer of this many bits.",
)
@pass_context
def cli(
    ctx: Context,
    verbose: bool,
    directory: Optional[Path],
    field_width: Optional[str],
) -> None:
    """Semantic version tool.

    Validate, compare, sort and bump SemVer 2.0.0 version strings.

    \b
    Examples:
        semver validate 1.2.3-rc.1
        semver compare 1.0.0-alpha 1.0.0
        semver sort 1.0.0 2.0.0 1.0.0-rc.1
        git tag | semver highest
        semver bump minor 1.2.3
        semver set patch 7 1.2.3
    """
    ctx.project_dir = directory
    ctx.field_width = int(field_width) if field_width else None
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register commands
from .commands import bump, compare, sort, validate

cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(sort.highest)
cli.add_command(bump.bump)
cli.add_command(bump.set_field)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except SemVerError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
