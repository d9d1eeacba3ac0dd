# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and requirement matching.

This package parses versions following the SemVer 2.0.0 specification,
orders them by semver precedence, and checks them against version
requirements such as ">=1.0.0 <2.0.0", "~1.4.3" or "^0.3.1".

Example:
    >>> from semver_req import parse_version, parse_requirement, satisfies
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> str(parse_requirement("^1.3.4"))
    '>=1.3.4 <2.0.0'
    >>>
    >>> satisfies("1.9.0", "^1.3.4")
    True
"""

import logging

__version__ = "0.1.0"

from .errors import (
    SemverError,
    InvalidVersionError,
    InvalidRequirementError,
    ParseErrorCode,
    RequirementErrorCode,
)
from .semver import (
    MAX_VERSION_LENGTH,
    Version,
    parse_version,
    version_from_string,
    version_from,
    version_format,
    is_valid_semver,
)
from .compare import (
    Ordering,
    compare_versions,
    version_compare,
    compare_prerelease,
    semver_cmp,
    version_key,
)
from .requirement import (
    MAX_REQUIREMENT_LENGTH,
    Bound,
    Comparator,
    Requirement,
    parse_requirement,
    requirement_from_string,
    requirement_from,
    requirement_format,
)
from .match import (
    filter_matching,
    requirement_matches,
    satisfies,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "SemverError",
    "InvalidVersionError",
    "InvalidRequirementError",
    "ParseErrorCode",
    "RequirementErrorCode",
    # Version parsing
    "MAX_VERSION_LENGTH",
    "Version",
    "parse_version",
    "version_from_string",
    "version_from",
    "version_format",
    "is_valid_semver",
    # Version comparison
    "Ordering",
    "compare_versions",
    "version_compare",
    "compare_prerelease",
    "semver_cmp",
    "version_key",
    # Requirements
    "MAX_REQUIREMENT_LENGTH",
    "Bound",
    "Comparator",
    "Requirement",
    "parse_requirement",
    "requirement_from_string",
    "requirement_from",
    "requirement_format",
    # Matching
    "filter_matching",
    "requirement_matches",
    "satisfies",
]
