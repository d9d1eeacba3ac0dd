# SPDX-License-Identifier: MIT
"""Version comparison following semver 2.0.0 precedence rules.

Precedence is decided by major, minor and patch in that order, then a
release outranks any pre-release of the same core version, then pre-release
identifiers are compared pairwise. Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union

from .semver import Version, parse_version


class Ordering(IntEnum):
    """Result of comparing two versions.

    The sign gives the order (negative: left side is lower). The magnitude
    names the field where the two versions first differ.
    """

    MAJOR_LESS = -5
    MINOR_LESS = -4
    PATCH_LESS = -3
    PRERELEASE_LESS = -2
    EQUAL = 0
    PRERELEASE_GREATER = 2
    PATCH_GREATER = 3
    MINOR_GREATER = 4
    MAJOR_GREATER = 5

    @property
    def sign(self) -> int:
        """Return -1, 0 or 1."""
        return (self > 0) - (self < 0)

    @property
    def is_less(self) -> bool:
        return self < 0

    @property
    def is_greater(self) -> bool:
        return self > 0

    @property
    def field(self) -> Optional[str]:
        """Name of the deciding field, or None when the versions are equal."""
        return _FIELD_NAMES.get(abs(self))

    def __neg__(self) -> Ordering:
        return Ordering(-int(self))


_FIELD_NAMES = {5: "major", 4: "minor", 3: "patch", 2: "prerelease"}


def _is_numeric(identifier: str) -> bool:
    return bool(identifier) and all("0" <= c <= "9" for c in identifier)


def _compare_identifiers(id1: str, id2: str) -> int:
    """Compare a single pair of pre-release identifiers, returning -1, 0 or 1."""
    is_num1 = _is_numeric(id1)
    is_num2 = _is_numeric(id2)

    if is_num1 and is_num2:
        n1, n2 = int(id1), int(id2)
        return (n1 > n2) - (n1 < n2)
    if is_num1:
        # Numeric < alphanumeric per SemVer
        return -1
    if is_num2:
        return 1
    b1, b2 = id1.encode("utf-8"), id2.encode("utf-8")
    return (b1 > b2) - (b1 < b2)


def compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release strings.

    Returns:
        A negative number if pre1 < pre2, 0 if equal, a positive number if
        pre1 > pre2. The magnitude is the 1-based position of the identifier
        that decided the result.

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha). Empty strings are
    treated as absent.
    """
    # No pre-release > any pre-release
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for position, (p1, p2) in enumerate(zip(parts1, parts2), start=1):
        result = _compare_identifiers(p1, p2)
        if result:
            return result * position

    # All compared parts equal - longer pre-release has higher precedence
    position = min(len(parts1), len(parts2)) + 1
    if len(parts1) > len(parts2):
        return position
    if len(parts1) < len(parts2):
        return -position
    return 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> Ordering:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        An Ordering; negative if version1 < version2, EQUAL if they have the
        same precedence, positive if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        Build metadata is ignored in comparisons per SemVer specification.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.MAJOR_LESS: -5>
        >>> compare_versions("1.0.0", "1.0.0+build")
        <Ordering.EQUAL: 0>
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        <Ordering.PRERELEASE_LESS: -2>
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr, weight in (("major", 5), ("minor", 4), ("patch", 3)):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return Ordering(-weight if val1 < val2 else weight)

    result = compare_prerelease(v1.prerelease, v2.prerelease)
    if result < 0:
        return Ordering.PRERELEASE_LESS
    if result > 0:
        return Ordering.PRERELEASE_GREATER
    return Ordering.EQUAL


# Name used by the version/requirement function pairs
version_compare = compare_versions


def semver_cmp(version1: str, version2: str) -> int:
    """Compare two version strings, returning -1, 0 or 1.

    Raises:
        InvalidVersionError: If either string is not a valid version
    """
    return compare_versions(parse_version(version1), parse_version(version2)).sign


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Releases sort after every pre-release of the same core version
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease.split("."):
            if _is_numeric(part):
                parts.append((0, int(part), b""))
            else:
                parts.append((1, 0, part.encode("utf-8")))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
