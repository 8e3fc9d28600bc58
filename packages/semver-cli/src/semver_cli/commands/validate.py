# SPDX-License-Identifier: MIT
"""Validate version strings against SemVer 2.0.0."""

from __future__ import annotations

import click

from semver_core import InvalidVersionError, SemVerError, parse_version

from ..main import Context, echo_error, echo_info, echo_success, pass_context, read_versions


@click.command()
@click.argument("versions", nargs=-1)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only report invalid versions.",
)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], quiet: bool) -> None:
    """Check that each VERSION is a valid semantic version.

    Reads versions from stdin, one per line, when none are given.
    Exits with status 1 if any version is invalid.

    \b
    Examples:
        semver validate 1.2.3 1.2.3-rc.1+build.5
        semver validate --quiet < versions.txt
    """
    try:
        config = ctx.load_config()
    except SemVerError as e:
        echo_error(str(e))
        raise SystemExit(1)

    candidates = read_versions(versions)
    if not candidates:
        echo_error("No versions given")
        raise SystemExit(1)

    invalid = 0
    for text in candidates:
        try:
            version = parse_version(text, config)
        except InvalidVersionError as e:
            invalid += 1
            echo_error(str(e))
            continue
        if not quiet:
            echo_success(f"{version}: valid")

    if invalid:
        echo_error(f"{invalid} of {len(candidates)} versions are invalid")
        raise SystemExit(1)

    if not quiet:
        echo_info(f"Validation passed ({len(candidates)} checked)")
