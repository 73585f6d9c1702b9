# SPDX-License-Identifier: MIT
"""Command line interface for version-guard."""

from .main import cli, main

__all__ = ["cli", "main"]
