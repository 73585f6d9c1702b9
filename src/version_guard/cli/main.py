# SPDX-License-Identifier: MIT
"""CLI entry point for the version-guard command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from .config import ConfigError, GuardConfig, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[GuardConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> GuardConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
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


@click.group()
@click.version_option(package_name="version-guard")
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
    help="Read pyproject.toml from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse, compare and gate on free-form version numbers.

    Digits are the only meaningful characters: "1.2", "1_2" and
    "1 dot 2" are the same version.

    \b
    Examples:
        version-guard normalize 1 dot 2
        version-guard compare 1.10 1.9
        version-guard check 3.11.4 --min 3.9 --below 4
        version-guard check          # bounds from pyproject.toml
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import normalize, compare, check

cli.add_command(normalize.normalize)
cli.add_command(compare.compare)
cli.add_command(check.check)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
