# SPDX-License-Identifier: MIT
"""Compare two versions by precedence."""

from __future__ import annotations

import click

from semver_core import Ordering, SemVerError, compare_versions, parse_version

from ..main import Context, echo_error, echo_info, pass_context

_SYMBOLS = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "==",
    Ordering.GREATER: ">",
}


@click.command()
@click.argument("first")
@click.argument("second")
@pass_context
def compare(ctx: Context, first: str, second: str) -> None:
    """Compare FIRST and SECOND by SemVer precedence.

    Build metadata is ignored, so 1.0.0+a and 1.0.0+b compare equal.

    \b
    Examples:
        semver compare 1.0.0-alpha 1.0.0      # 1.0.0-alpha < 1.0.0
        semver compare 1.0.0-2 1.0.0-10       # 1.0.0-2 < 1.0.0-10
    """
    try:
        config = ctx.load_config()
        v1 = parse_version(first, config)
        v2 = parse_version(second, config)
        result = compare_versions(v1, v2)
    except SemVerError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"{v1} {_SYMBOLS[result]} {v2}")
