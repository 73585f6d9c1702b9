# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import normalize, compare, check

__all__ = ["normalize", "compare", "check"]
