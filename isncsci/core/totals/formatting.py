"""
Totals Formatting Helpers

Pure functions used by the aggregator: duplicate detection, the
ordinal-ordered level string and the three-state subtotal rendering.
None of them keep state or mutate their inputs.
"""
from __future__ import annotations

from typing import Iterable, Optional

from isncsci.config import settings
from isncsci.utils import InvalidArgumentError, get_logger
from .base import NeuroLevel, Number

logger = get_logger(__name__)


def contains_level_with_name(values: Iterable[NeuroLevel], level_name: str) -> bool:
    """True if a level named ``level_name`` (case-insensitive) is in ``values``."""
    key = level_name.upper()
    return any(level.key == key for level in values)


def get_values_string(
    values: Optional[Iterable[NeuroLevel]],
    separator: Optional[str] = None,
) -> str:
    """
    Join level names ordered by ascending ordinal.

    Args:
        values: Levels to render.  An empty collection yields ``""``.
        separator: Defaults to ``settings.values_separator``.

    Returns:
        e.g. ``"C5,T1"`` for ``{T1 (8), C5 (4)}``.

    Raises:
        InvalidArgumentError: if ``values`` is None.
    """
    if values is None:
        logger.warning("get_values_string: missing required parameter values")
        raise InvalidArgumentError(
            "Missing required parameter values: NeuroLevel collection",
            operation="get_values_string",
            argument="values",
        )
    if separator is None:
        separator = settings.values_separator

    # sorted() builds a new list; the caller's collection keeps its order
    ordered = sorted(values, key=lambda level: level.ordinal)
    return separator.join(level.name for level in ordered)


def format_number(value: Number) -> str:
    """Canonical decimal string: integral floats render without ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get_summary_string_for(
    total: Number,
    has_impairment_not_due_to_sci: bool,
    contains_nt: bool,
    not_determinable_marker: Optional[str] = None,
    impairment_marker: Optional[str] = None,
) -> str:
    """
    Render a total according to its flags.

    NT dominates: any NT input makes the total not determinable (``UTD``),
    whatever the value or impairment flag.  Otherwise impairment not due to
    SCI appends ``!`` to the value.
    """
    if contains_nt:
        return not_determinable_marker or settings.not_determinable_marker
    if has_impairment_not_due_to_sci:
        marker = impairment_marker or settings.impairment_not_due_to_sci_marker
        return f"{format_number(total)}{marker}"
    return format_number(total)
