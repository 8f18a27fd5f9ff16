"""
Unit Tests for Totals Formatting Helpers

Tests for the ordinal-ordered level string, the three-state subtotal
rendering and duplicate detection.
"""
import itertools

import pytest

from isncsci.core.totals import (
    NeuroLevel,
    contains_level_with_name,
    format_number,
    get_summary_string_for,
    get_values_string,
)
from isncsci.utils import InvalidArgumentError


class TestGetValuesString:
    """Tests for get_values_string."""

    def test_orders_by_ordinal(self):
        """Names are listed by ascending ordinal, not insertion or alphabetical order."""
        values = [NeuroLevel("T1", 9), NeuroLevel("C5", 4)]
        assert get_values_string(values) == "C5,T1"

    def test_not_alphabetical(self):
        values = [NeuroLevel("C2", 1), NeuroLevel("C10", 12), NeuroLevel("B", 3)]
        assert get_values_string(values) == "C2,B,C10"

    def test_permutation_invariant(self):
        """Every permutation of the same levels renders identically."""
        values = [NeuroLevel("C4", 3), NeuroLevel("T2", 9), NeuroLevel("L1", 20), NeuroLevel("S4_5", 28)]
        outputs = {get_values_string(list(p)) for p in itertools.permutations(values)}
        assert outputs == {"C4,T2,L1,S4_5"}

    def test_does_not_reorder_input(self):
        """Sorting for display leaves the caller's list untouched."""
        values = [NeuroLevel("T1", 8), NeuroLevel("C5", 4), NeuroLevel("L3", 22)]
        snapshot = list(values)
        get_values_string(values)
        assert values == snapshot

    def test_empty_collection(self):
        assert get_values_string([]) == ""

    def test_none_raises(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            get_values_string(None)
        assert exc_info.value.code == "INVALID_ARGUMENT"
        assert exc_info.value.details["argument"] == "values"

    def test_custom_separator(self):
        values = [NeuroLevel("C6", 5), NeuroLevel("C5", 4)]
        assert get_values_string(values, separator=", ") == "C5, C6"


class TestGetSummaryStringFor:
    """Tests for the three-state total rendering."""

    def test_nt_dominates(self):
        assert get_summary_string_for(12, True, True) == "UTD"

    def test_nt_without_impairment(self):
        assert get_summary_string_for(12, False, True) == "UTD"

    def test_impairment_marker(self):
        assert get_summary_string_for(12, True, False) == "12!"

    def test_plain_value(self):
        assert get_summary_string_for(12, False, False) == "12"

    def test_zero(self):
        assert get_summary_string_for(0, False, False) == "0"

    def test_integral_float_renders_without_decimal(self):
        assert get_summary_string_for(8.0, True, False) == "8!"

    def test_explicit_markers(self):
        assert get_summary_string_for(3, False, True, not_determinable_marker="ND") == "ND"
        assert get_summary_string_for(3, True, False, impairment_marker="*") == "3*"


class TestFormatNumber:
    """Tests for canonical number rendering."""

    def test_int(self):
        assert format_number(56) == "56"

    def test_fractional_float(self):
        assert format_number(2.5) == "2.5"

    def test_integral_float(self):
        assert format_number(100.0) == "100"


class TestContainsLevelWithName:
    """Tests for duplicate detection."""

    def test_case_insensitive(self):
        values = [NeuroLevel("C5", 4)]
        assert contains_level_with_name(values, "c5")
        assert contains_level_with_name(values, "C5")

    def test_stored_name_case_ignored(self):
        values = [NeuroLevel("s4_5", 28)]
        assert contains_level_with_name(values, "S4_5")

    def test_missing(self):
        assert not contains_level_with_name([NeuroLevel("C5", 4)], "C6")
        assert not contains_level_with_name([], "C6")
