# SPDX-License-Identifier: MIT
"""Unit tests for matching versions against requirements."""

import pytest

from semver_req import (
    InvalidRequirementError,
    InvalidVersionError,
    filter_matching,
    parse_requirement,
    parse_version,
    requirement_matches,
    satisfies,
)


class TestRequirementMatches:
    """Tests for requirement_matches."""

    @pytest.mark.parametrize(
        "version,requirement,expected",
        [
            ("0.0.0", ">=0.0.1 <1.0.0", False),
            ("0.0.1-alpha", ">=0.0.1 <1.0.0", False),
            ("0.0.1", ">=0.0.1 <1.0.0", True),
            ("0.0.1", ">0.0.1 <1.0.0", False),
            ("0.0.2", ">0.0.1 <1.0.0", True),
            ("0.1.0", ">0.0.1 <1.0.0", True),
            ("0.9.9-alpha", ">0.0.1 <1.0.0", True),
            ("1.0.0", ">0.0.1 <1.0.0", False),
            ("1.0.0", ">0.0.1 <=1.0.0", True),
            ("1.3.0", ">=1.3.0 <2.0.0", True),
            ("1.45.3", ">=1.3.0 <2.0.0", True),
            ("2.0.0", ">=1.3.0 <2.0.0", False),
        ],
    )
    def test_ranges(self, version, requirement, expected):
        assert requirement_matches(parse_requirement(requirement), parse_version(version)) is expected

    @pytest.mark.parametrize(
        "version,requirement,expected",
        [
            ("1.1.3", "~1.1.0", True),
            ("1.1.3", "~1.1.1", True),
            ("1.2.3", "~1.1.1", False),
            ("1.1.3", "~1.0.1", False),
            ("1.9.9", "^1.3.4", True),
            ("2.0.0", "^1.3.4", False),
            ("1.3.3", "^1.3.4", False),
            ("0.3.9", "^0.3.4", True),
            ("0.4.0", "^0.3.4", False),
            ("0.0.2", "^0.0.2", True),
            ("0.0.3", "^0.0.2", False),
        ],
    )
    def test_shorthand(self, version, requirement, expected):
        assert requirement_matches(parse_requirement(requirement), parse_version(version)) is expected

    def test_one_sided_bounds(self):
        assert requirement_matches(parse_requirement(">1.0.0"), parse_version("99.0.0"))
        assert not requirement_matches(parse_requirement(">1.0.0"), parse_version("1.0.0"))
        assert requirement_matches(parse_requirement("<=2.0.0"), parse_version("0.0.0"))
        assert not requirement_matches(parse_requirement("<2.0.0"), parse_version("2.0.0"))

    def test_exact_ignores_build_metadata(self):
        assert requirement_matches(parse_requirement("=1.0.0"), parse_version("1.0.0+build.7"))

    def test_string_version(self):
        assert requirement_matches(parse_requirement("~1.4.3"), "1.4.9")

    def test_contains_operator(self):
        assert "1.4.9" in parse_requirement("~1.4.3")
        assert parse_version("1.5.0") not in parse_requirement("~1.4.3")


class TestSatisfies:
    """Tests for the satisfies convenience function."""

    def test_match(self):
        assert satisfies("1.0.0", ">=0.0.0 <99.99.99") is True

    def test_no_match(self):
        assert satisfies("1.0.0", "<1.0.0") is False

    def test_invalid_version(self):
        with pytest.raises(InvalidVersionError):
            satisfies("0.a.0", ">=0.0.0 <99.99.99")

    def test_invalid_requirement(self):
        with pytest.raises(InvalidRequirementError):
            satisfies("1.0.0", "!~1.1.1")

    def test_version_error_takes_priority(self):
        """Test that a bad version is reported before a bad requirement."""
        with pytest.raises(InvalidVersionError):
            satisfies("1.0", "!~1.1.1")


class TestFilterMatching:
    """Tests for filter_matching."""

    def test_keeps_input_order(self):
        versions = ["1.5.0", "1.4.3", "2.0.0", "1.4.10", "1.4.2"]
        result = [str(v) for v in filter_matching("~1.4.3", versions)]
        assert result == ["1.4.3", "1.4.10"]

    def test_requirement_object(self):
        req = parse_requirement(">=1.0.0")
        result = list(filter_matching(req, [parse_version("0.9.0"), parse_version("1.0.0")]))
        assert result == [parse_version("1.0.0")]

    def test_invalid_version_in_input(self):
        with pytest.raises(InvalidVersionError):
            list(filter_matching(">=1.0.0", ["1.0.0", "bogus"]))
