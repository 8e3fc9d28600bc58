# SPDX-License-Identifier: MIT
"""Sort versions and pick the highest."""

from __future__ import annotations

import click

from semver_core import SemVerError, find_highest_version, sort_versions

from ..main import Context, echo_error, echo_info, pass_context, read_versions


@click.command()
@click.argument("versions", nargs=-1)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print VERSIONS from highest to lowest precedence.

    Reads versions from stdin, one per line, when none are given. Versions
    of equal precedence keep their input order. Any invalid version fails
    the whole command and nothing is printed.

    \b
    Examples:
        semver sort 1.0.0 2.0.0 1.0.0-rc.1
        git tag | semver sort
    """
    try:
        ordered = sort_versions(read_versions(versions), ctx.load_config())
    except SemVerError as e:
        echo_error(str(e))
        raise SystemExit(1)

    for text in ordered:
        echo_info(text)


@click.command()
@click.argument("versions", nargs=-1)
@pass_context
def highest(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print the highest of VERSIONS.

    Reads versions from stdin, one per line, when none are given.

    \b
    Examples:
        semver highest 1.0.0 2.0.0-rc.1 1.9.9
        git tag | semver highest
    """
    try:
        echo_info(find_highest_version(read_versions(versions), ctx.load_config()))
    except SemVerError as e:
        echo_error(str(e))
        raise SystemExit(1)
