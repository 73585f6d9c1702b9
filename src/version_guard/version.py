# SPDX-License-Identifier: MIT
"""Free-form numeric version parsing, ordering and guards.

Only runs of ASCII digits carry meaning; every other character is a
separator, so all of these describe the same version:

    1.1    1_1    1+1    1 1    1 . 1    1 dot 1

Trailing zero components are dropped on construction, which makes
"1", "1.0" and "1.0.0" identical in storage, display and comparison.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar, Union

# Separator used by the canonical display form
SEPARATOR = "."

# The canonical display form is padded with zeros to at least this many components
MIN_ELEMENTS = 3

DIGIT_RUN = re.compile(r"[0-9]+")

T = TypeVar("T")

VersionLike = Union["Version", str, int, float]


class MalformedVersion(ValueError):
    """Raised when a value holds no usable version number."""

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"Malformed version number string {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True, init=False, eq=False)
class Version:
    """An immutable, normalized version number.

    Accepts a string, a number or another Version. Strings may use any
    separators, e.g. '1.1', '1_0', '1 4', '1 dot 23 dot 3'.

    A Version compares equal to any string or number naming the same
    version, but hashes like its components. Sets and dict keys only match
    other Version instances: Version("1") == "1" while "1" not in {Version("1")}.

    Attributes:
        components: Integer components, most significant first, with no
            trailing zeros
    """

    components: tuple[int, ...]

    def __init__(self, version: VersionLike) -> None:
        if isinstance(version, Version):
            components = version.components
        else:
            components = _parse_components(version)
        object.__setattr__(self, "components", components)

    @classmethod
    def coerce(cls, version: VersionLike) -> "Version":
        """Return ``version`` if it is already a Version, else parse it."""
        if isinstance(version, Version):
            return version
        return cls(version)

    def __str__(self) -> str:
        """Return the canonical form, zero padded to MIN_ELEMENTS components."""
        padding = (0,) * (MIN_ELEMENTS - len(self.components))
        return SEPARATOR.join(str(c) for c in self.components + padding)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __hash__(self) -> int:
        return hash(self.components)

    @property
    def major(self) -> int:
        return self._component(0)

    @property
    def minor(self) -> int:
        return self._component(1)

    @property
    def patch(self) -> int:
        return self._component(2)

    def _component(self, index: int) -> int:
        if index < len(self.components):
            return self.components[index]
        return 0

    def compare(self, other: VersionLike) -> int:
        """Compare against another version-like value.

        Components are compared numerically, so 1.10 is greater than 1.9.
        Missing trailing components count as zero.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other

        Raises:
            MalformedVersion: If ``other`` is not a valid version
        """
        theirs = Version.coerce(other).components
        ours = self.components
        for index in range(max(len(ours), len(theirs))):
            mine = ours[index] if index < len(ours) else 0
            other_value = theirs[index] if index < len(theirs) else 0
            if mine != other_value:
                return -1 if mine < other_value else 1
        return 0

    def __eq__(self, other: object) -> bool:
        try:
            return self.compare(other) == 0
        except MalformedVersion:
            return False

    def __lt__(self, other: VersionLike) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: VersionLike) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: VersionLike) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: VersionLike) -> bool:
        return self.compare(other) >= 0

    def is_between(self, minimum: VersionLike, maximum: VersionLike) -> bool:
        """Return True if ``minimum <= self <= maximum``."""
        low = Version.coerce(minimum)
        high = Version.coerce(maximum)
        return self >= low and self <= high

    # Guards. Each calls ``action`` with no arguments when the relation
    # holds and returns its result; otherwise returns None.

    def between(
        self, minimum: VersionLike, maximum: VersionLike, action: Callable[[], T]
    ) -> Optional[T]:
        """Run ``action`` if the version lies within ``[minimum, maximum]``."""
        if self.is_between(minimum, maximum):
            return action()
        return None

    def greater_than(self, version: VersionLike, action: Callable[[], T]) -> Optional[T]:
        """Run ``action`` if this version is greater than ``version``."""
        if self > version:
            return action()
        return None

    def greater_or_equal(self, version: VersionLike, action: Callable[[], T]) -> Optional[T]:
        """Run ``action`` if this version is greater than or equal to ``version``."""
        if self >= version:
            return action()
        return None

    def less_than(self, version: VersionLike, action: Callable[[], T]) -> Optional[T]:
        """Run ``action`` if this version is less than ``version``."""
        if self < version:
            return action()
        return None

    def less_or_equal(self, version: VersionLike, action: Callable[[], T]) -> Optional[T]:
        """Run ``action`` if this version is less than or equal to ``version``."""
        if self <= version:
            return action()
        return None


def _parse_components(version: Any) -> tuple[int, ...]:
    """Extract digit runs from ``version`` and strip trailing zeros."""
    if version is None:
        raise MalformedVersion(version)

    components = [int(run) for run in DIGIT_RUN.findall(str(version))]
    while components and components[-1] == 0:
        components.pop()

    if not components:
        raise MalformedVersion(version)
    return tuple(components)


def parse_version(version: VersionLike) -> Version:
    """Parse a version-like value into a Version.

    Args:
        version: A string with digits and any separators, a number, or a
            Version

    Returns:
        The normalized Version

    Raises:
        MalformedVersion: If no non-zero digit run is found

    Examples:
        >>> parse_version("1 dot 23 dot 3")
        Version('1.23.3')

        >>> parse_version("2.0.0").components
        (2,)
    """
    return Version(version)


def is_valid_version(version: Any) -> bool:
    """Check if a value can be parsed into a Version.

    Examples:
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("fred")
        False
        >>> is_valid_version("0.0.0")
        False
    """
    try:
        Version(version)
    except MalformedVersion:
        return False
    return True
