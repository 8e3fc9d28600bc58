# SPDX-License-Identifier: MIT
"""Derive new versions: increment or override a field."""

from __future__ import annotations

import click

from semver_core import (
    SemVerError,
    next_major,
    next_minor,
    next_patch,
    parse_version,
    with_major,
    with_minor,
    with_patch,
)

from ..main import Context, echo_error, echo_info, pass_context

_PARTS = ["major", "minor", "patch"]

_NEXT = {"major": next_major, "minor": next_minor, "patch": next_patch}
_WITH = {"major": with_major, "minor": with_minor, "patch": with_patch}


@click.command()
@click.argument("part", type=click.Choice(_PARTS))
@click.argument("version")
@pass_context
def bump(ctx: Context, part: str, version: str) -> None:
    """Increment PART of VERSION.

    Lower fields reset to zero; pre-release and build metadata are dropped.

    \b
    Examples:
        semver bump major 1.2.3-alpha.1+build.1   # 2.0.0
        semver bump patch 1.2.3                   # 1.2.4
    """
    try:
        config = ctx.load_config()
        result = _NEXT[part](parse_version(version, config), config)
    except SemVerError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(result))


@click.command("set")
@click.argument("part", type=click.Choice(_PARTS))
@click.argument("value", type=int)
@click.argument("version")
@pass_context
def set_field(ctx: Context, part: str, value: int, version: str) -> None:
    """Set PART of VERSION to VALUE.

    Lower fields reset to zero; pre-release and build metadata are dropped.
    Pass negative numbers after "--".

    \b
    Examples:
        semver set minor 5 1.2.3                  # 1.5.0
        semver set patch 0 1.2.3-rc.1             # 1.2.0
    """
    try:
        config = ctx.load_config()
        result = _WITH[part](parse_version(version, config), value, config)
    except SemVerError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(result))
