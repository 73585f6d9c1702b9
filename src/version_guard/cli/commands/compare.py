# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import click

from version_guard import MalformedVersion, Version

from ..main import echo_error, echo_info

_OPERATORS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str) -> None:
    """Compare FIRST with SECOND and print the relation.

    \b
    Examples:
        version-guard compare 1.10 1.9     # 1.10.0 > 1.9.0
        version-guard compare 1 1.0.0      # 1.0.0 = 1.0.0
    """
    try:
        left = Version(first)
        right = Version(second)
    except MalformedVersion as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"{left} {_OPERATORS[left.compare(right)]} {right}")
