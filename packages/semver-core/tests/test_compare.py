# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semver_core import (
    InvalidComparisonError,
    MalformedVersionError,
    Ordering,
    Version,
    compare_versions,
    parse_version,
    version_key,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == Ordering.EQUAL

    def test_result_is_three_way_int(self):
        """Test that results compare equal to -1, 0 and 1."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0") == 0
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == Ordering.LESS
        assert compare_versions("2.0.0", "1.0.0") == Ordering.GREATER

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == Ordering.LESS
        assert compare_versions("1.1.0", "1.0.0") == Ordering.GREATER

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == Ordering.LESS
        assert compare_versions("1.0.1", "1.0.0") == Ordering.GREATER

    def test_fields_compare_numerically(self):
        """Test that core fields compare as integers, not text."""
        assert compare_versions("1.10.0", "1.9.0") == Ordering.GREATER
        assert compare_versions("2147483647.0.0", "2147483648.0.0") == Ordering.LESS

    def test_higher_field_wins(self):
        """Test that a higher-significance field short-circuits."""
        assert compare_versions("2.0.0-alpha", "1.99.99") == Ordering.GREATER

    def test_release_beats_prerelease(self):
        """Test that a release outranks its pre-releases."""
        assert compare_versions("1.0.0", "1.0.0-alpha") == Ordering.GREATER
        assert compare_versions("1.0.0-rc.99", "1.0.0") == Ordering.LESS

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+x", "1.0.0+y") == Ordering.EQUAL
        assert compare_versions("1.0.0+build", "1.0.0") == Ordering.EQUAL
        assert compare_versions("1.0.0-rc.1+a", "1.0.0-rc.1+b") == Ordering.EQUAL

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(parse_version("1.0.0"), parse_version("2.0.0")) == Ordering.LESS

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == Ordering.LESS
        assert compare_versions("1.0.0", v) == Ordering.EQUAL

    def test_none_operand(self):
        """Test that a missing operand raises InvalidComparisonError."""
        v = parse_version("1.0.0")
        with pytest.raises(InvalidComparisonError, match="Versions must not be None"):
            compare_versions(v, None)  # type: ignore
        with pytest.raises(InvalidComparisonError):
            compare_versions(None, v)  # type: ignore
        with pytest.raises(InvalidComparisonError):
            compare_versions(None, None)  # type: ignore

    def test_invalid_string_operand(self):
        """Test that invalid version strings propagate parse errors."""
        with pytest.raises(MalformedVersionError):
            compare_versions("1.0", "1.0.0")


class TestPrereleaseOrdering:
    """Tests for pre-release ordering edge cases."""

    def test_numeric_below_alphanumeric(self):
        """Test that numeric identifiers sort below alphanumeric ones."""
        assert compare_versions("1.0.0-1", "1.0.0-alpha") == Ordering.LESS
        assert compare_versions("1.0.0-alpha", "1.0.0-1") == Ordering.GREATER
        assert compare_versions("1.0.0-1.alpha", "1.0.0-alpha.1") == Ordering.LESS

    def test_numeric_prerelease_parts(self):
        """Test numeric identifiers compare numerically, not lexically."""
        assert compare_versions("1.0.0-2", "1.0.0-10") == Ordering.LESS
        assert compare_versions("1.0.0-beta.11", "1.0.0-beta.2") == Ordering.GREATER

    def test_very_long_numeric_identifiers(self):
        """Test numeric identifiers longer than any machine integer."""
        small = "1.0.0-" + "9" * 40
        large = "1.0.0-1" + "0" * 40
        assert compare_versions(small, large) == Ordering.LESS

    def test_alphanumeric_compare_by_code_point(self):
        """Test that alphanumeric identifiers compare lexically in ASCII order."""
        assert compare_versions("1.0.0-alpha", "1.0.0-beta") == Ordering.LESS
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == Ordering.LESS
        assert compare_versions("1.0.0-alpha-2", "1.0.0-alpha1") == Ordering.LESS
        assert compare_versions("1.0.0-rc10", "1.0.0-rc9") == Ordering.LESS

    def test_longer_prerelease_wins_on_equal_prefix(self):
        """Test that more identifiers outrank fewer when the prefix matches."""
        assert compare_versions("1.0.0-alpha", "1.0.0-alpha.1") == Ordering.LESS
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.1.0") == Ordering.LESS
        assert compare_versions("1.0.0-alpha.beta.1", "1.0.0-alpha.beta") == Ordering.GREATER

    def test_difference_beats_length(self):
        """Test that a differing identifier decides before length does."""
        assert compare_versions("1.0.0-alpha.2", "1.0.0-alpha.1.9") == Ordering.GREATER

    def test_semver_org_precedence_example(self):
        """Test the precedence example from semver.org."""
        versions = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for i in range(len(versions) - 1):
            assert (
                compare_versions(versions[i], versions[i + 1]) == Ordering.LESS
            ), f"{versions[i]} should be < {versions[i + 1]}"


class TestRichComparison:
    """Tests for comparison operators on Version."""

    def test_operators(self):
        """Test that operators follow precedence."""
        a = parse_version("1.0.0-alpha")
        b = parse_version("1.0.0")
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert not b < a

    def test_operators_ignore_build(self):
        """Test that versions differing only in build are neither less nor greater."""
        a = parse_version("1.0.0+x")
        b = parse_version("1.0.0+y")
        assert not a < b
        assert not a > b
        assert a <= b
        assert a >= b

    def test_builtin_sorted_and_max(self):
        """Test that Version objects work with sorted and max."""
        versions = [parse_version(s) for s in ["1.0.0", "1.0.0-rc.1", "0.9.0"]]
        assert [str(v) for v in sorted(versions)] == ["0.9.0", "1.0.0-rc.1", "1.0.0"]
        assert str(max(versions)) == "1.0.0"

    def test_unsupported_operand(self):
        """Test that ordering against other types raises TypeError."""
        with pytest.raises(TypeError):
            parse_version("1.0.0") < "1.0.1"  # noqa: B015


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_with_prerelease(self):
        """Test sorting versions with pre-releases."""
        versions = ["1.0.0", "1.0.0-alpha", "1.0.0-1", "1.0.0-alpha.1"]
        assert sorted(versions, key=version_key) == [
            "1.0.0-1",
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0",
        ]

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_version("2.0.0"), parse_version("1.0.0")]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions[0].major == 1
        assert sorted_versions[1].major == 2

    def test_key_equal_for_build_variants(self):
        """Test that build metadata does not change the key."""
        assert version_key("1.0.0+a") == version_key("1.0.0+b")

    def test_none(self):
        """Test that a missing version raises InvalidComparisonError."""
        with pytest.raises(InvalidComparisonError):
            version_key(None)  # type: ignore


class TestOrderingLaws:
    """Tests for comparison transitivity, antisymmetry and reflexivity."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        a, b, c = "1.0.0-alpha", "1.0.0-beta", "1.0.0"
        assert compare_versions(a, b) == Ordering.LESS
        assert compare_versions(b, c) == Ordering.LESS
        assert compare_versions(a, c) == Ordering.LESS

    def test_antisymmetry(self):
        """Test that comparison is antisymmetric: if a < b, then b > a."""
        assert compare_versions("1.0.0", "2.0.0") == Ordering.LESS
        assert compare_versions("2.0.0", "1.0.0") == Ordering.GREATER

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        for v in ["1.0.0", "1.0.0-alpha", "1.0.0+build", "1.0.0-0.3.7+x"]:
            assert compare_versions(v, v) == Ordering.EQUAL
            parsed = Version.parse(v)
            assert compare_versions(parsed, parsed) == Ordering.EQUAL
