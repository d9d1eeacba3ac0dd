# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101

Strings are scanned left to right in a single pass so that every rejection
carries a precise ParseErrorCode and the index where scanning stopped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidVersionError, ParseErrorCode

logger = logging.getLogger(__name__)

# Inputs of this length or longer are rejected before scanning
MAX_VERSION_LENGTH = 255

_DIGITS = frozenset("0123456789")
_IDENTIFIER_CHARS = frozenset(
    "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-"
)
_TAIL_CHARS = _IDENTIFIER_CHARS | {"."}


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifier (e.g., "alpha.1", "beta", "rc.2")
        build: Optional build metadata (e.g., "build.123", "20240101")

    Equality is structural, so build metadata distinguishes two values.
    The ordering operators follow semver precedence and ignore build metadata.
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return version_format(self)

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import compare_versions

        return compare_versions(self, other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import compare_versions

        return compare_versions(self, other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import compare_versions

        return compare_versions(self, other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import compare_versions

        return compare_versions(self, other) >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        """Return the dot-separated pre-release identifiers, empty for releases."""
        if self.prerelease is None:
            return ()
        return tuple(self.prerelease.split("."))


def _reject(text: str, code: ParseErrorCode, position: Optional[int] = None) -> InvalidVersionError:
    logger.debug("Rejected version %r: %s at index %s", text, code.name, position)
    return InvalidVersionError(text, code, position)


def _scan_run(text: str, pos: int, allowed: frozenset[str]) -> int:
    """Return the index of the first character at or after pos not in allowed."""
    end = pos
    while end < len(text) and text[end] in allowed:
        end += 1
    return end


def _scan_number(text: str, pos: int, terminators: str, final: bool = False) -> tuple[int, int]:
    """Scan one numeric core field starting at pos.

    Args:
        text: The full version string
        pos: Index where the field starts
        terminators: Characters allowed to end the field
        final: Whether the field may also be ended by the end of input

    Returns:
        A tuple of (value, index of the terminator or len(text))
    """
    end = _scan_run(text, pos, _DIGITS)

    if end == len(text):
        if not final or end == pos:
            raise _reject(text, ParseErrorCode.PREMATURE_END_OF_INPUT, end)
    elif text[end] not in terminators or end == pos:
        raise _reject(text, ParseErrorCode.DISALLOWED_CHARACTER, end)

    if end - pos > 1 and text[pos] == "0":
        raise _reject(text, ParseErrorCode.DISALLOWED_CHARACTER, pos)

    return int(text[pos:end]), end


def _check_identifiers(text: str, pos: int, end: int, numeric_rule: bool) -> None:
    """Validate the dot-separated identifiers in text[pos:end].

    Empty identifiers are rejected. With numeric_rule, purely numeric
    identifiers longer than one character must not start with "0".
    """
    start = pos
    for identifier in text[pos:end].split("."):
        if not identifier:
            if start == len(text):
                raise _reject(text, ParseErrorCode.PREMATURE_END_OF_INPUT, start)
            raise _reject(text, ParseErrorCode.DISALLOWED_CHARACTER, start)
        if numeric_rule and len(identifier) > 1 and identifier[0] == "0":
            if all(c in _DIGITS for c in identifier):
                raise _reject(text, ParseErrorCode.DISALLOWED_CHARACTER, start)
        start += len(identifier) + 1


def _scan_tail(text: str, pos: int, terminators: str, numeric_rule: bool) -> tuple[str, int]:
    """Scan a pre-release or build field starting at pos.

    Returns:
        A tuple of (field text, index of the terminator or len(text))
    """
    end = _scan_run(text, pos, _TAIL_CHARS)
    _check_identifiers(text, pos, end, numeric_rule)
    if end < len(text) and text[end] not in terminators:
        raise _reject(text, ParseErrorCode.DISALLOWED_CHARACTER, end)
    return text[pos:end], end


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning.
            Its ``code`` tells TOO_LONG, PREMATURE_END_OF_INPUT,
            DISALLOWED_CHARACTER and STRUCTURAL_ERROR apart.

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', build=None)

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string),
            ParseErrorCode.DISALLOWED_CHARACTER,
            message=f"Version must be a string, got {type(version_string).__name__}",
        )

    text = version_string
    if len(text) >= MAX_VERSION_LENGTH:
        raise _reject(text, ParseErrorCode.TOO_LONG)

    major, pos = _scan_number(text, 0, ".")
    minor, pos = _scan_number(text, pos + 1, ".")
    patch, pos = _scan_number(text, pos + 1, "-+", final=True)

    prerelease = None
    build = None
    if pos < len(text) and text[pos] == "-":
        prerelease, pos = _scan_tail(text, pos + 1, "+", numeric_rule=True)
    if pos < len(text) and text[pos] == "+":
        build, pos = _scan_tail(text, pos + 1, "", numeric_rule=False)

    if pos != len(text):
        raise _reject(text, ParseErrorCode.STRUCTURAL_ERROR, pos)

    return Version(major, minor, patch, prerelease, build)


# Name used by the version/requirement function pairs
version_from_string = parse_version


def version_from(
    major: int,
    minor: int,
    patch: int,
    prerelease: Optional[str] = None,
    build: Optional[str] = None,
) -> Version:
    """Build a Version directly from its fields.

    Empty pre-release or build strings are treated as absent.

    Raises:
        InvalidVersionError: If a numeric field is negative or not an int,
            or if prerelease/build contain characters semver does not allow
    """
    for value in (major, minor, patch):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidVersionError(
                f"{major}.{minor}.{patch}",
                ParseErrorCode.DISALLOWED_CHARACTER,
                message=f"Version fields must be non-negative integers, got {value!r}",
            )

    prerelease = prerelease or None
    build = build or None
    if prerelease is not None:
        _scan_tail(prerelease, 0, "", numeric_rule=True)
    if build is not None:
        _scan_tail(build, 0, "", numeric_rule=False)

    return Version(major, minor, patch, prerelease, build)


def version_format(version: Version) -> str:
    """Format a Version as MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]."""
    text = version.base_version
    if version.prerelease:
        text += f"-{version.prerelease}"
    if version.build:
        text += f"+{version.build}"
    return text


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
