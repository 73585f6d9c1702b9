# SPDX-License-Identifier: MIT
"""Version comparison helpers for plain strings and numbers.

Components compare numerically and missing trailing components count as
zero, so "1" == "1.0.0" and "1.10" > "1.9".
"""

from __future__ import annotations

from .version import Version, VersionLike


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two version-like values.

    Args:
        version1: First version (string, number or Version object)
        version2: Second version (string, number or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        MalformedVersion: If either value is not a valid version

    Examples:
        >>> compare_versions("1.0", "2")
        -1
        >>> compare_versions("1", "1.0.0")
        0
        >>> compare_versions("1.10.1", "1.9.1")
        1
    """
    return Version.coerce(version1).compare(version2)


def version_key(version: VersionLike) -> tuple[int, ...]:
    """Return a sort key for a version-like value.

    Trailing zeros are already stripped, so plain tuple ordering of the
    components matches version ordering.

    Examples:
        >>> sorted(["1.10", "1.9", "1"], key=version_key)
        ['1', '1.9', '1.10']
    """
    return Version.coerce(version).components
