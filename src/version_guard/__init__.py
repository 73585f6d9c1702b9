# SPDX-License-Identifier: MIT
"""Free-form version parsing, comparison and version-gated execution.

Any run of digits is a version component and everything else is a
separator. Trailing zeros are insignificant.

Example:
    >>> from version_guard import Version, compare_versions
    >>>
    >>> version = Version("1.2.3")
    >>> version > "1.2"
    True
    >>> str(Version("1"))
    '1.0.0'
    >>>
    >>> version.greater_or_equal("1.1", lambda: "enabled")
    'enabled'
    >>>
    >>> compare_versions("1.10", "1.9")
    1
"""

__version__ = "0.1.0"

from .version import (
    Version,
    VersionLike,
    MalformedVersion,
    parse_version,
    is_valid_version,
    SEPARATOR,
    MIN_ELEMENTS,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Version parsing
    "Version",
    "VersionLike",
    "MalformedVersion",
    "parse_version",
    "is_valid_version",
    "SEPARATOR",
    "MIN_ELEMENTS",
    # Version comparison
    "compare_versions",
    "version_key",
]
