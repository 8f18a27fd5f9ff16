"""
ISNCSCI Totals Layer

Accumulates the per-level results of an ISNCSCI classification and renders
them for reporting.

Usage:
    from isncsci.core.totals import IsncsciTotals, NeuroLevel

    totals = IsncsciTotals()
    totals.add_right_motor_value(NeuroLevel("C5", 4))
    totals.get_right_motor_long_value_string()   # "C5"
"""
from .aggregator import IsncsciTotals, TOTAL_NAMES
from .base import LevelSetKind, NeuroLevel, Side, SubtotalCategory, SubtotalFacts
from .candidates import CandidateLevels, ZPP_EXCLUDED_LEVELS
from .formatting import (
    contains_level_with_name,
    format_number,
    get_summary_string_for,
    get_values_string,
)

__all__ = [
    "IsncsciTotals",
    "TOTAL_NAMES",
    "LevelSetKind",
    "NeuroLevel",
    "Side",
    "SubtotalCategory",
    "SubtotalFacts",
    "CandidateLevels",
    "ZPP_EXCLUDED_LEVELS",
    "contains_level_with_name",
    "format_number",
    "get_summary_string_for",
    "get_values_string",
]
