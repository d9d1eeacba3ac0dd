# SPDX-License-Identifier: MIT
"""Matching versions against requirements."""

from __future__ import annotations

from typing import Iterable, Iterator, Union

from .compare import compare_versions
from .requirement import Requirement, parse_requirement
from .semver import Version, parse_version


def requirement_matches(requirement: Requirement, version: Union[str, Version]) -> bool:
    """Check whether a version satisfies a requirement.

    A bound is satisfied when it is absent, when the version lies strictly
    inside it, or when the version equals it and the bound is inclusive.

    Args:
        requirement: The requirement to check against
        version: Version string or Version object

    Returns:
        True if both bounds are satisfied

    Raises:
        InvalidVersionError: If version is a string that cannot be parsed
    """
    v = parse_version(version) if isinstance(version, str) else version

    lower = requirement.lower
    if lower is not None:
        order = compare_versions(v, lower.version)
        if order < 0 or (order == 0 and not lower.inclusive):
            return False

    upper = requirement.upper
    if upper is not None:
        order = compare_versions(v, upper.version)
        if order > 0 or (order == 0 and not upper.inclusive):
            return False

    return True


def satisfies(version_string: str, requirement_string: str) -> bool:
    """Check whether a version string satisfies a requirement string.

    The version is parsed first, so a bad version is reported even when the
    requirement is also invalid.

    Raises:
        InvalidVersionError: If the version string is invalid
        InvalidRequirementError: If the requirement string is invalid

    Examples:
        >>> satisfies("1.4.7", "~1.4.3")
        True
        >>> satisfies("2.0.0", "^1.3.4")
        False
    """
    version = parse_version(version_string)
    requirement = parse_requirement(requirement_string)
    return requirement_matches(requirement, version)


def filter_matching(
    requirement: Union[str, Requirement], versions: Iterable[Union[str, Version]]
) -> Iterator[Version]:
    """Yield the versions that satisfy a requirement, in input order.

    Strings are parsed as they are reached; an invalid one raises
    InvalidVersionError at that point.
    """
    req = parse_requirement(requirement) if isinstance(requirement, str) else requirement
    for version in versions:
        v = parse_version(version) if isinstance(version, str) else version
        if requirement_matches(req, v):
            yield v
