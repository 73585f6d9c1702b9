# SPDX-License-Identifier: MIT
"""Print the canonical form of a version."""

from __future__ import annotations

import click

from version_guard import MalformedVersion, Version

from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("value", nargs=-1, required=True)
@click.option(
    "--components",
    is_flag=True,
    help="Print the stored components instead of the display form.",
)
@pass_context
def normalize(ctx: Context, value: tuple[str, ...], components: bool) -> None:
    """Print the canonical form of VALUE.

    Multiple arguments are joined with spaces, so the version does not
    need quoting.

    \b
    Examples:
        version-guard normalize 1.2           # 1.2.0
        version-guard normalize 1 dot 23 dot 3   # 1.23.3
        version-guard normalize --components 4.0.0   # 4
    """
    raw = " ".join(value)

    try:
        version = Version(raw)
    except MalformedVersion as e:
        echo_error(str(e))
        raise SystemExit(1)

    if ctx.verbose:
        echo_info(f"Parsed {raw!r} into {len(version.components)} component(s)")

    if components:
        echo_info(" ".join(str(c) for c in version.components))
    else:
        echo_info(str(version))
