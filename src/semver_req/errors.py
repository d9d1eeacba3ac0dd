# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing versions and requirements."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ParseErrorCode(Enum):
    """Why a version string was rejected."""

    TOO_LONG = 10
    PREMATURE_END_OF_INPUT = 11
    DISALLOWED_CHARACTER = 12
    STRUCTURAL_ERROR = 13


class RequirementErrorCode(Enum):
    """Why a requirement string (or bound pair) was rejected."""

    END_OF_INPUT = 1
    INVALID_SEMVER = 2
    INVALID_COMPARATOR = 3
    EMPTY_RANGE = 4
    TOO_LONG = 5
    TOO_MANY_PARTS = 6


_VERSION_MESSAGES = {
    ParseErrorCode.TOO_LONG: "version string is too long",
    ParseErrorCode.PREMATURE_END_OF_INPUT: "unexpected end of version string",
    ParseErrorCode.DISALLOWED_CHARACTER: "character not allowed here",
    ParseErrorCode.STRUCTURAL_ERROR: "unconsumed input after version",
}

_REQUIREMENT_MESSAGES = {
    RequirementErrorCode.END_OF_INPUT: "requirement is empty",
    RequirementErrorCode.INVALID_SEMVER: "requirement contains an invalid version",
    RequirementErrorCode.INVALID_COMPARATOR: "requirement contains an invalid comparator",
    RequirementErrorCode.EMPTY_RANGE: "requirement bounds describe an empty range",
    RequirementErrorCode.TOO_LONG: "requirement string is too long",
    RequirementErrorCode.TOO_MANY_PARTS: "requirement has more than two parts",
}


class SemverError(ValueError):
    """Base class for all errors raised by semver_req."""

    def __init__(self, text: str, code: Enum, message: str, position: Optional[int] = None):
        self.text = text
        self.code = code
        self.position = position
        self.message = message
        super().__init__(self.message)


class InvalidVersionError(SemverError):
    """Raised when a string does not follow semantic versioning.

    Attributes:
        text: The rejected input
        code: A ParseErrorCode naming the failure
        position: Index of the offending character, if known
    """

    code: ParseErrorCode

    def __init__(
        self,
        text: str,
        code: ParseErrorCode = ParseErrorCode.DISALLOWED_CHARACTER,
        position: Optional[int] = None,
        message: str = "",
    ):
        if not message:
            message = f"Invalid semantic version {text!r}: {_VERSION_MESSAGES[code]}"
            if position is not None:
                message += f" (at index {position})"
        super().__init__(text, code, message, position)


class InvalidRequirementError(SemverError):
    """Raised when a version requirement cannot be built.

    Attributes:
        text: The rejected input (empty for directly constructed bounds)
        code: A RequirementErrorCode naming the failure
    """

    code: RequirementErrorCode

    def __init__(self, text: str, code: RequirementErrorCode, message: str = ""):
        if not message:
            message = f"Invalid version requirement {text!r}: {_REQUIREMENT_MESSAGES[code]}"
        super().__init__(text, code, message)
