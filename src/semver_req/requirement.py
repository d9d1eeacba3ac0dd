# SPDX-License-Identifier: MIT
"""Version requirements: parsing, construction and formatting.

A requirement is a pair of optional bounds. Every comparator form, including
the caret (^) and tilde (~) shorthands, is resolved into that pair when the
requirement is parsed:

- ``=1.2.3``  -> ``>=1.2.3 <=1.2.3`` (printed as ``=1.2.3``)
- ``~1.4.3``  -> ``>=1.4.3 <1.5.0``
- ``^1.3.4``  -> ``>=1.3.4 <2.0.0``
- ``^0.3.4``  -> ``>=0.3.4 <0.4.0``
- ``^0.0.2``  -> ``=0.0.2``

Two comparator parts may be given, separated by whitespace, ``,`` or ``;``.
The ``>``/``>=`` part becomes the lower bound and the ``<``/``<=`` part the
upper bound, whichever order they are written in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .compare import compare_versions
from .errors import InvalidRequirementError, InvalidVersionError, RequirementErrorCode
from .semver import Version, parse_version

logger = logging.getLogger(__name__)

# Inputs of this length or longer are rejected before scanning
MAX_REQUIREMENT_LENGTH = 512

_SEPARATORS = frozenset(" \t\r\n,;")
_COMPARATOR_CHARS = frozenset("<>=^~")
_VERSION_CHARS = frozenset(
    "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-.+"
)


class Comparator(Enum):
    """Comparator tokens recognised in a requirement string."""

    EQ = "="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    CARET = "^"
    TILDE = "~"

    @classmethod
    def parse(cls, token: str) -> Optional[Comparator]:
        """Return the comparator spelled by token, or None if it is not one."""
        try:
            return cls(token)
        except ValueError:
            return None

    @property
    def inclusive(self) -> bool:
        """Whether a bound produced by this comparator includes its version."""
        return _INCLUSIVE[self]

    @property
    def direction(self) -> str:
        """One of "lower", "upper", "exact" or "shorthand"."""
        return _DIRECTION[self]


_INCLUSIVE = {
    Comparator.EQ: True,
    Comparator.LT: False,
    Comparator.GT: False,
    Comparator.LE: True,
    Comparator.GE: True,
    Comparator.CARET: True,
    Comparator.TILDE: True,
}

_DIRECTION = {
    Comparator.EQ: "exact",
    Comparator.LT: "upper",
    Comparator.GT: "lower",
    Comparator.LE: "upper",
    Comparator.GE: "lower",
    Comparator.CARET: "shorthand",
    Comparator.TILDE: "shorthand",
}


@dataclass(frozen=True, slots=True)
class Bound:
    """One end of a requirement range."""

    version: Version
    inclusive: bool


def _range_error(lower: Optional[Bound], upper: Optional[Bound]) -> bool:
    """Return True if the two bounds admit no version at all."""
    if lower is None or upper is None:
        return False
    order = compare_versions(lower.version, upper.version)
    if order > 0:
        return True
    return order == 0 and not (lower.inclusive or upper.inclusive)


@dataclass(frozen=True, slots=True)
class Requirement:
    """A version range made of an optional lower and an optional upper bound.

    A requirement without any bound matches every version. It can only be
    built directly, never parsed from a string.

    Raises:
        InvalidRequirementError: On construction, if the bounds describe an
            empty range
    """

    lower: Optional[Bound] = None
    upper: Optional[Bound] = None

    def __post_init__(self) -> None:
        if _range_error(self.lower, self.upper):
            raise InvalidRequirementError(
                requirement_format(self), RequirementErrorCode.EMPTY_RANGE
            )

    def __str__(self) -> str:
        return requirement_format(self)

    def __contains__(self, version: Union[str, Version]) -> bool:
        return self.matches(version)

    def matches(self, version: Union[str, Version]) -> bool:
        """Return True if version lies within this requirement."""
        from .match import requirement_matches

        return requirement_matches(self, version)

    @property
    def is_exact(self) -> bool:
        """Return True if exactly one precedence value satisfies this requirement."""
        if self.lower is None or self.upper is None:
            return False
        return (
            self.lower.inclusive
            and self.upper.inclusive
            and compare_versions(self.lower.version, self.upper.version) == 0
        )

    @property
    def is_unbounded(self) -> bool:
        """Return True if this requirement matches every version."""
        return self.lower is None and self.upper is None


@dataclass(frozen=True, slots=True)
class _Part:
    comparator: Comparator
    version: Version


def _reject(text: str, code: RequirementErrorCode) -> InvalidRequirementError:
    logger.debug("Rejected requirement %r: %s", text, code.name)
    return InvalidRequirementError(text, code)


def _skip(text: str, pos: int, chars: frozenset[str]) -> int:
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def _scan_part(text: str, pos: int) -> tuple[_Part, int]:
    """Scan one comparator and version literal starting at pos.

    Comparator characters may be separated from each other and from the
    version by separators. A part without comparator defaults to "=".

    Returns:
        A tuple of (part, index just past the version literal)
    """
    token = ""
    while True:
        pos = _skip(text, pos, _SEPARATORS)
        if pos < len(text) and text[pos] in _COMPARATOR_CHARS:
            token += text[pos]
            pos += 1
            continue
        break

    if pos == len(text) or text[pos] not in "0123456789":
        raise _reject(text, RequirementErrorCode.INVALID_SEMVER)

    end = _skip(text, pos, _VERSION_CHARS)
    try:
        version = parse_version(text[pos:end])
    except InvalidVersionError as exc:
        logger.debug("Rejected requirement %r: %s", text, exc.message)
        raise InvalidRequirementError(text, RequirementErrorCode.INVALID_SEMVER) from exc

    comparator = Comparator.parse(token or "=")
    if comparator is None:
        raise _reject(text, RequirementErrorCode.INVALID_COMPARATOR)

    return _Part(comparator, version), end


def _scan_parts(text: str) -> list[_Part]:
    parts: list[_Part] = []
    pos = _skip(text, 0, _SEPARATORS)
    while pos < len(text):
        if len(parts) == 2:
            raise _reject(text, RequirementErrorCode.TOO_MANY_PARTS)
        part, pos = _scan_part(text, pos)
        parts.append(part)
        pos = _skip(text, pos, _SEPARATORS)
    return parts


def _resolve_single(part: _Part) -> tuple[Optional[Bound], Optional[Bound]]:
    """Turn a lone comparator part into a (lower, upper) bound pair."""
    v = part.version
    direction = part.comparator.direction

    if direction == "lower":
        return Bound(v, part.comparator.inclusive), None
    if direction == "upper":
        return None, Bound(v, part.comparator.inclusive)
    if direction == "exact":
        return Bound(v, True), Bound(v, True)

    if part.comparator is Comparator.TILDE:
        # Patch-level changes within the given minor
        return Bound(v, True), Bound(Version(v.major, v.minor + 1, 0), False)

    if v.major > 0:
        upper = Version(v.major + 1, 0, 0)
    elif v.minor > 0:
        upper = Version(0, v.minor + 1, 0)
    else:
        # ^0.0.x admits no drift at all
        return Bound(v, True), Bound(v, True)
    return Bound(v, True), Bound(upper, False)


def _resolve_pair(text: str, first: _Part, second: _Part) -> tuple[Bound, Bound]:
    """Order two comparator parts into (lower, upper), whatever their input order."""
    directions = (first.comparator.direction, second.comparator.direction)
    if directions == ("lower", "upper"):
        lower, upper = first, second
    elif directions == ("upper", "lower"):
        lower, upper = second, first
    else:
        raise _reject(text, RequirementErrorCode.INVALID_COMPARATOR)
    return (
        Bound(lower.version, lower.comparator.inclusive),
        Bound(upper.version, upper.comparator.inclusive),
    )


def parse_requirement(requirement_string: str) -> Requirement:
    """Parse a version requirement string into a Requirement.

    Args:
        requirement_string: One or two comparator+version parts, e.g.
            ">=1.0.5 <2.0.0", "~3.4.2" or "1.2.3"

    Returns:
        The resolved Requirement

    Raises:
        InvalidRequirementError: If the string cannot be parsed or describes
            an empty range. Its ``code`` names the failure.

    Examples:
        >>> str(parse_requirement("<1.0.0 >=0.0.1"))
        '>=0.0.1 <1.0.0'
        >>> str(parse_requirement("~1.4.3"))
        '>=1.4.3 <1.5.0'
    """
    if not isinstance(requirement_string, str):
        raise InvalidRequirementError(
            str(requirement_string),
            RequirementErrorCode.END_OF_INPUT,
            f"Requirement must be a string, got {type(requirement_string).__name__}",
        )

    text = requirement_string
    if len(text) >= MAX_REQUIREMENT_LENGTH:
        raise _reject(text, RequirementErrorCode.TOO_LONG)

    parts = _scan_parts(text)
    if not parts:
        raise _reject(text, RequirementErrorCode.END_OF_INPUT)

    if len(parts) == 1:
        lower, upper = _resolve_single(parts[0])
    else:
        lower, upper = _resolve_pair(text, parts[0], parts[1])

    if _range_error(lower, upper):
        raise _reject(text, RequirementErrorCode.EMPTY_RANGE)
    return Requirement(lower, upper)


# Name used by the version/requirement function pairs
requirement_from_string = parse_requirement


def _coerce(version: Union[str, Version, None]) -> Optional[Version]:
    if version is None or isinstance(version, Version):
        return version
    return parse_version(version)


def requirement_from(
    lower: Union[str, Version, None],
    lower_inclusive: bool,
    upper: Union[str, Version, None],
    upper_inclusive: bool,
) -> Requirement:
    """Build a Requirement directly from its bounds.

    Either bound may be None to leave that side open; passing None for both
    yields a requirement that matches every version. For an exact match pass
    the same version twice with both flags set.

    Raises:
        InvalidRequirementError: If the bounds describe an empty range
        InvalidVersionError: If a bound is given as an invalid version string
    """
    lower_version = _coerce(lower)
    upper_version = _coerce(upper)
    return Requirement(
        Bound(lower_version, bool(lower_inclusive)) if lower_version is not None else None,
        Bound(upper_version, bool(upper_inclusive)) if upper_version is not None else None,
    )


def _lower_comparator(bound: Bound) -> str:
    return ">=" if bound.inclusive else ">"


def _upper_comparator(bound: Bound) -> str:
    return "<=" if bound.inclusive else "<"


def requirement_format(requirement: Requirement) -> str:
    """Format a Requirement in its canonical text form.

    Equal inclusive bounds collapse to "=VERSION"; a requirement without
    bounds formats to an empty string.

    Examples:
        >>> requirement_format(requirement_from("1.0.0", True, "2.0.0", False))
        '>=1.0.0 <2.0.0'
        >>> requirement_format(requirement_from("1.3.9", True, "1.3.9", True))
        '=1.3.9'
    """
    lower, upper = requirement.lower, requirement.upper
    if lower is None and upper is None:
        return ""
    if upper is None:
        return f"{_lower_comparator(lower)}{lower.version}"
    if lower is None:
        return f"{_upper_comparator(upper)}{upper.version}"
    if requirement.is_exact:
        return f"={lower.version}"
    return f"{_lower_comparator(lower)}{lower.version} {_upper_comparator(upper)}{upper.version}"
