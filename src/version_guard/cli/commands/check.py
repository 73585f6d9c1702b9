# SPDX-License-Identifier: MIT
"""Check a version against lower and upper bounds."""

from __future__ import annotations

from typing import Callable, Optional

import click

from version_guard import MalformedVersion, Version

from ..config import ConfigError
from ..main import echo_error, echo_info, echo_success, echo_warning, pass_context, Context


def _bound_checks(
    version: Version,
    minimum: Optional[str],
    maximum: Optional[str],
    above: Optional[str],
    below: Optional[str],
) -> list[tuple[str, str, Callable[[str, Callable[[], bool]], Optional[bool]]]]:
    """Pair each given bound with its operator and the guard that tests it."""
    candidates = [
        (">=", minimum, version.greater_or_equal),
        ("<=", maximum, version.less_or_equal),
        (">", above, version.greater_than),
        ("<", below, version.less_than),
    ]
    return [(op, bound, guard) for op, bound, guard in candidates if bound]


@click.command()
@click.argument("version", required=False)
@click.option("--min", "minimum", help="Inclusive lower bound.")
@click.option("--max", "maximum", help="Inclusive upper bound.")
@click.option("--above", help="Exclusive lower bound.")
@click.option("--below", help="Exclusive upper bound.")
@pass_context
def check(
    ctx: Context,
    version: Optional[str],
    minimum: Optional[str],
    maximum: Optional[str],
    above: Optional[str],
    below: Optional[str],
) -> None:
    """Exit with status 0 if VERSION satisfies every bound, 1 otherwise.

    VERSION defaults to [project].version from pyproject.toml. When no
    bound option is given, minimum and maximum are read from the
    [tool.version-guard] table.

    \b
    Examples:
        version-guard check 3.11.4 --min 3.9 --below 4
        version-guard check 1.2 --max 1.2          # bounds are inclusive
        version-guard -C path/to/project check
    """
    no_bounds_given = not any((minimum, maximum, above, below))

    if version is None or no_bounds_given:
        try:
            config = ctx.load_config()
        except ConfigError as e:
            echo_error(str(e))
            raise SystemExit(1)

        if ctx.verbose:
            echo_info(f"Using configuration from {config.project_dir}")

        if version is None:
            if not config.version:
                echo_error("No version given and none found in pyproject.toml")
                raise SystemExit(1)
            version = config.version

        if no_bounds_given:
            minimum = config.minimum or None
            maximum = config.maximum or None
            if minimum is None and maximum is None:
                echo_warning(
                    f"No minimum or maximum in [tool.version-guard] under {config.project_dir}"
                )

    try:
        parsed = Version(version)
        checks = _bound_checks(parsed, minimum, maximum, above, below)
        if not checks:
            echo_error("No bounds given. Use --min, --max, --above or --below.")
            raise SystemExit(1)

        failed: list[str] = []
        for op, bound, guard in checks:
            expected = f"{op} {Version(bound)}"
            if ctx.verbose:
                echo_info(f"Checking {parsed} {expected}")
            if not guard(bound, lambda: True):
                failed.append(expected)
    except MalformedVersion as e:
        echo_error(str(e))
        raise SystemExit(1)

    if failed:
        echo_error(f"{parsed} does not satisfy {', '.join(failed)}")
        raise SystemExit(1)

    satisfied = ", ".join(f"{op} {Version(bound)}" for op, bound, _ in checks)
    echo_success(f"{parsed} satisfies {satisfied}")
