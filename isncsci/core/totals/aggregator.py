"""
ISNCSCI Totals Aggregator

Holds the raw results of running an ISNCSCI examination through the
classification algorithm: candidate sensory / motor / ZPP levels per side,
the possible neurological levels of injury, the AIS grades and the eight
per-side subtotals.

Usage:
    from isncsci.core.totals import IsncsciTotals, NeuroLevel, Side, SubtotalCategory

    totals = IsncsciTotals()
    totals.add_right_motor_value(NeuroLevel("C5", 4))
    totals.set_subtotal(Side.LEFT, SubtotalCategory.UPPER_MOTOR, 5)
    totals.set_subtotal(Side.LEFT, SubtotalCategory.LOWER_MOTOR, 3,
                        has_impairment_not_due_to_sci=True)
    totals.get_left_motor_total()        # "8!"

Every named accessor (``add_right_sensory_value``, ``left_motor_zpp_contains``,
...) is produced by the factories below from a (side, kind) pair, so all
sets share one contract.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from isncsci.models.totals import TotalsReport, build_totals_report
from isncsci.utils import InvalidArgumentError, get_logger
from .base import LevelSetKind, NeuroLevel, Number, Side, SubtotalCategory, SubtotalFacts
from .candidates import ZPP_EXCLUDED_LEVELS, CandidateLevels
from .formatting import get_summary_string_for

logger = get_logger(__name__)

_NLI = "neurological_level_of_injury"

# Sets whose extremal pair (most rostral / most caudal) is tracked
_EXTREMAL_KINDS = (LevelSetKind.MOTOR,)
_ZPP_KINDS = (LevelSetKind.SENSORY_ZPP, LevelSetKind.MOTOR_ZPP)


def _label(side: Side, kind: LevelSetKind) -> str:
    return f"{side.value}_{kind.value}"


# ── Accessor factories ───────────────────────────────────────────────────────

def _adder(side: Optional[Side], kind: Optional[LevelSetKind], name: str):
    def add(self: "IsncsciTotals", level: NeuroLevel) -> None:
        self._level_set(side, kind).add(level, operation=name)
    add.__name__ = name
    add.__doc__ = f"Add a level to the {_describe(side, kind)} candidates."
    return add


def _values_getter(side: Optional[Side], kind: Optional[LevelSetKind], name: str):
    def get_values(self: "IsncsciTotals") -> List[NeuroLevel]:
        return self._level_set(side, kind).values()
    get_values.__name__ = name
    get_values.__doc__ = f"Copy of the {_describe(side, kind)} candidates in insertion order."
    return get_values


def _long_value_string_getter(side: Optional[Side], kind: Optional[LevelSetKind], name: str):
    def get_long_value_string(self: "IsncsciTotals") -> str:
        return self._level_set(side, kind).long_value_string()
    get_long_value_string.__name__ = name
    get_long_value_string.__doc__ = (
        f"{_describe(side, kind).capitalize()} candidates ordered by ordinal, comma separated."
    )
    return get_long_value_string


def _emptiness_check(side: Optional[Side], kind: Optional[LevelSetKind], name: str):
    def is_empty(self: "IsncsciTotals") -> bool:
        return self._level_set(side, kind).is_empty()
    is_empty.__name__ = name
    is_empty.__doc__ = f"True if no {_describe(side, kind)} candidate has been recorded."
    return is_empty


def _containment_check(side: Optional[Side], kind: Optional[LevelSetKind], name: str):
    def contains(self: "IsncsciTotals", level_name: str) -> bool:
        return self._level_set(side, kind).contains(level_name, operation=name)
    contains.__name__ = name
    contains.__doc__ = f"True if ``level_name`` is a {_describe(side, kind)} candidate."
    return contains


def _soft_values_flag(side: Optional[Side], kind: Optional[LevelSetKind]):
    def fget(self: "IsncsciTotals") -> bool:
        return self._level_set(side, kind).has_only_soft_values

    def fset(self: "IsncsciTotals", value: bool) -> None:
        self._level_set(side, kind).has_only_soft_values = bool(value)

    return property(fget, fset, doc=f"{_describe(side, kind)} candidates come only from soft values")


def _extreme(side: Optional[Side], kind: Optional[LevelSetKind], attr: str):
    def fget(self: "IsncsciTotals") -> Optional[NeuroLevel]:
        return getattr(self._level_set(side, kind), attr)
    return property(fget, doc=f"{attr.replace('_', ' ')} {_describe(side, kind)} level")


def _subtotal_field(side: Side, category: SubtotalCategory, attr: str):
    def fget(self: "IsncsciTotals"):
        return getattr(self._subtotals[(side, category)], attr)

    def fset(self: "IsncsciTotals", value) -> None:
        setattr(self._subtotals[(side, category)], attr, value)

    return property(fget, fset)


def _total_getter(name: str, *slots: Tuple[Side, SubtotalCategory]):
    def get_total(self: "IsncsciTotals") -> str:
        return self.get_summary_for(*slots)
    get_total.__name__ = name
    return get_total


def _describe(side: Optional[Side], kind: Optional[LevelSetKind]) -> str:
    if side is None:
        return "neurological level of injury"
    return f"{side.value} {kind.value.replace('_', ' ')}"


# ── Aggregator ───────────────────────────────────────────────────────────────

class IsncsciTotals:
    """
    Accumulates per-level classification facts for one examination.

    One instance per exam: the classification collaborator populates it
    (in any order), the reporting collaborator reads it.  Not thread-safe;
    callers sharing an instance must serialise access.
    """

    def __init__(self):
        self._reset()

    def _reset(self) -> None:
        """Zero value: empty sets, no extremes, 0/False/False subtotals."""
        self._level_sets: Dict[Tuple[Side, LevelSetKind], CandidateLevels] = {}
        for side in Side:
            for kind in LevelSetKind:
                self._level_sets[(side, kind)] = CandidateLevels(
                    _label(side, kind),
                    track_extremes=kind in _EXTREMAL_KINDS,
                    excluded_names=ZPP_EXCLUDED_LEVELS if kind in _ZPP_KINDS else frozenset(),
                )
        self._neurological_levels_of_injury = CandidateLevels(_NLI, track_extremes=True)

        self._subtotals: Dict[Tuple[Side, SubtotalCategory], SubtotalFacts] = {
            (side, category): SubtotalFacts()
            for side in Side
            for category in SubtotalCategory
        }

        self._asia_impairment_scale_values: List[str] = []

        # Set by the classification algorithm; no logic here
        self.has_right_collins = False
        self.has_left_collins = False
        self.most_rostral_right_level_with_motor_function: Optional[NeuroLevel] = None
        self.most_caudal_right_level_with_motor_function: Optional[NeuroLevel] = None
        self.most_rostral_left_level_with_motor_function: Optional[NeuroLevel] = None
        self.most_caudal_left_level_with_motor_function: Optional[NeuroLevel] = None

    def _level_set(self, side: Optional[Side], kind: Optional[LevelSetKind]) -> CandidateLevels:
        if side is None:
            return self._neurological_levels_of_injury
        return self._level_sets[(Side(side), LevelSetKind(kind))]

    # ── Generic access ────────────────────────────────────────────────────
    def add_level(self, side: Side, kind: LevelSetKind, level: NeuroLevel) -> None:
        """Add ``level`` to the (side, kind) candidate set."""
        self._level_set(side, kind).add(level, operation=f"add_{_label(Side(side), LevelSetKind(kind))}_value")

    def get_level_set(self, side: Side, kind: LevelSetKind) -> List[NeuroLevel]:
        return self._level_set(side, kind).values()

    def set_subtotal(
        self,
        side: Side,
        category: SubtotalCategory,
        value: Number,
        has_impairment_not_due_to_sci: bool = False,
        contains_nt: bool = False,
    ) -> None:
        """Record one of the eight raw subtotals computed by the algorithm."""
        self._subtotals[(Side(side), SubtotalCategory(category))] = SubtotalFacts(
            value=value,
            has_impairment_not_due_to_sci=has_impairment_not_due_to_sci,
            contains_nt=contains_nt,
        )

    def get_subtotal(self, side: Side, category: SubtotalCategory) -> SubtotalFacts:
        """Copy of a raw subtotal record."""
        facts = self._subtotals[(Side(side), SubtotalCategory(category))]
        return SubtotalFacts(facts.value, facts.has_impairment_not_due_to_sci, facts.contains_nt)

    def combine(self, *slots: Tuple[Side, SubtotalCategory]) -> SubtotalFacts:
        """Sum the given subtotal slots; flags are OR-ed."""
        combined = SubtotalFacts()
        for slot in slots:
            combined = combined + self._subtotals[slot]
        return combined

    def get_summary_for(self, *slots: Tuple[Side, SubtotalCategory]) -> str:
        facts = self.combine(*slots)
        return get_summary_string_for(
            facts.value, facts.has_impairment_not_due_to_sci, facts.contains_nt
        )

    # ── Sensory ───────────────────────────────────────────────────────────
    is_right_sensory_empty = _emptiness_check(Side.RIGHT, LevelSetKind.SENSORY, "is_right_sensory_empty")
    add_right_sensory_value = _adder(Side.RIGHT, LevelSetKind.SENSORY, "add_right_sensory_value")
    get_right_sensory_values = _values_getter(Side.RIGHT, LevelSetKind.SENSORY, "get_right_sensory_values")
    get_right_sensory_long_value_string = _long_value_string_getter(
        Side.RIGHT, LevelSetKind.SENSORY, "get_right_sensory_long_value_string")
    right_sensory_contains = _containment_check(Side.RIGHT, LevelSetKind.SENSORY, "right_sensory_contains")

    is_left_sensory_empty = _emptiness_check(Side.LEFT, LevelSetKind.SENSORY, "is_left_sensory_empty")
    add_left_sensory_value = _adder(Side.LEFT, LevelSetKind.SENSORY, "add_left_sensory_value")
    get_left_sensory_values = _values_getter(Side.LEFT, LevelSetKind.SENSORY, "get_left_sensory_values")
    get_left_sensory_long_value_string = _long_value_string_getter(
        Side.LEFT, LevelSetKind.SENSORY, "get_left_sensory_long_value_string")
    left_sensory_contains = _containment_check(Side.LEFT, LevelSetKind.SENSORY, "left_sensory_contains")

    # ── Motor ─────────────────────────────────────────────────────────────
    is_right_motor_empty = _emptiness_check(Side.RIGHT, LevelSetKind.MOTOR, "is_right_motor_empty")
    add_right_motor_value = _adder(Side.RIGHT, LevelSetKind.MOTOR, "add_right_motor_value")
    get_right_motor_values = _values_getter(Side.RIGHT, LevelSetKind.MOTOR, "get_right_motor_values")
    get_right_motor_long_value_string = _long_value_string_getter(
        Side.RIGHT, LevelSetKind.MOTOR, "get_right_motor_long_value_string")
    right_motor_contains = _containment_check(Side.RIGHT, LevelSetKind.MOTOR, "right_motor_contains")

    is_left_motor_empty = _emptiness_check(Side.LEFT, LevelSetKind.MOTOR, "is_left_motor_empty")
    add_left_motor_value = _adder(Side.LEFT, LevelSetKind.MOTOR, "add_left_motor_value")
    get_left_motor_values = _values_getter(Side.LEFT, LevelSetKind.MOTOR, "get_left_motor_values")
    get_left_motor_long_value_string = _long_value_string_getter(
        Side.LEFT, LevelSetKind.MOTOR, "get_left_motor_long_value_string")
    left_motor_contains = _containment_check(Side.LEFT, LevelSetKind.MOTOR, "left_motor_contains")

    most_rostral_right_motor = _extreme(Side.RIGHT, LevelSetKind.MOTOR, "most_rostral")
    most_caudal_right_motor = _extreme(Side.RIGHT, LevelSetKind.MOTOR, "most_caudal")
    most_rostral_left_motor = _extreme(Side.LEFT, LevelSetKind.MOTOR, "most_rostral")
    most_caudal_left_motor = _extreme(Side.LEFT, LevelSetKind.MOTOR, "most_caudal")

    # ── Neurological level of injury ──────────────────────────────────────
    is_neurological_level_of_injury_empty = _emptiness_check(
        None, None, "is_neurological_level_of_injury_empty")
    add_neurological_level_of_injury = _adder(None, None, "add_neurological_level_of_injury")
    get_neurological_levels_of_injury = _values_getter(None, None, "get_neurological_levels_of_injury")
    get_neurological_levels_of_injury_long_value_string = _long_value_string_getter(
        None, None, "get_neurological_levels_of_injury_long_value_string")
    neurological_level_of_injury_contains = _containment_check(
        None, None, "neurological_level_of_injury_contains")

    most_rostral_neurological_level_of_injury = _extreme(None, None, "most_rostral")
    most_caudal_neurological_level_of_injury = _extreme(None, None, "most_caudal")

    # ── Zone of partial preservation ──────────────────────────────────────
    is_right_sensory_zpp_empty = _emptiness_check(Side.RIGHT, LevelSetKind.SENSORY_ZPP, "is_right_sensory_zpp_empty")
    add_right_sensory_zpp_value = _adder(Side.RIGHT, LevelSetKind.SENSORY_ZPP, "add_right_sensory_zpp_value")
    get_right_sensory_zpp_values = _values_getter(
        Side.RIGHT, LevelSetKind.SENSORY_ZPP, "get_right_sensory_zpp_values")
    get_right_sensory_zpp_long_value_string = _long_value_string_getter(
        Side.RIGHT, LevelSetKind.SENSORY_ZPP, "get_right_sensory_zpp_long_value_string")
    right_sensory_zpp_contains = _containment_check(
        Side.RIGHT, LevelSetKind.SENSORY_ZPP, "right_sensory_zpp_contains")

    is_left_sensory_zpp_empty = _emptiness_check(Side.LEFT, LevelSetKind.SENSORY_ZPP, "is_left_sensory_zpp_empty")
    add_left_sensory_zpp_value = _adder(Side.LEFT, LevelSetKind.SENSORY_ZPP, "add_left_sensory_zpp_value")
    get_left_sensory_zpp_values = _values_getter(Side.LEFT, LevelSetKind.SENSORY_ZPP, "get_left_sensory_zpp_values")
    get_left_sensory_zpp_long_value_string = _long_value_string_getter(
        Side.LEFT, LevelSetKind.SENSORY_ZPP, "get_left_sensory_zpp_long_value_string")
    left_sensory_zpp_contains = _containment_check(
        Side.LEFT, LevelSetKind.SENSORY_ZPP, "left_sensory_zpp_contains")

    is_right_motor_zpp_empty = _emptiness_check(Side.RIGHT, LevelSetKind.MOTOR_ZPP, "is_right_motor_zpp_empty")
    add_right_motor_zpp_value = _adder(Side.RIGHT, LevelSetKind.MOTOR_ZPP, "add_right_motor_zpp_value")
    get_right_motor_zpp_values = _values_getter(Side.RIGHT, LevelSetKind.MOTOR_ZPP, "get_right_motor_zpp_values")
    get_right_motor_zpp_long_value_string = _long_value_string_getter(
        Side.RIGHT, LevelSetKind.MOTOR_ZPP, "get_right_motor_zpp_long_value_string")
    right_motor_zpp_contains = _containment_check(Side.RIGHT, LevelSetKind.MOTOR_ZPP, "right_motor_zpp_contains")

    is_left_motor_zpp_empty = _emptiness_check(Side.LEFT, LevelSetKind.MOTOR_ZPP, "is_left_motor_zpp_empty")
    add_left_motor_zpp_value = _adder(Side.LEFT, LevelSetKind.MOTOR_ZPP, "add_left_motor_zpp_value")
    get_left_motor_zpp_values = _values_getter(Side.LEFT, LevelSetKind.MOTOR_ZPP, "get_left_motor_zpp_values")
    get_left_motor_zpp_long_value_string = _long_value_string_getter(
        Side.LEFT, LevelSetKind.MOTOR_ZPP, "get_left_motor_zpp_long_value_string")
    left_motor_zpp_contains = _containment_check(Side.LEFT, LevelSetKind.MOTOR_ZPP, "left_motor_zpp_contains")

    # ── "Only soft values" flags ──────────────────────────────────────────
    right_sensory_has_only_soft_values = _soft_values_flag(Side.RIGHT, LevelSetKind.SENSORY)
    left_sensory_has_only_soft_values = _soft_values_flag(Side.LEFT, LevelSetKind.SENSORY)
    right_motor_has_only_soft_values = _soft_values_flag(Side.RIGHT, LevelSetKind.MOTOR)
    left_motor_has_only_soft_values = _soft_values_flag(Side.LEFT, LevelSetKind.MOTOR)
    right_sensory_zpp_has_only_soft_values = _soft_values_flag(Side.RIGHT, LevelSetKind.SENSORY_ZPP)
    left_sensory_zpp_has_only_soft_values = _soft_values_flag(Side.LEFT, LevelSetKind.SENSORY_ZPP)
    right_motor_zpp_has_only_soft_values = _soft_values_flag(Side.RIGHT, LevelSetKind.MOTOR_ZPP)
    left_motor_zpp_has_only_soft_values = _soft_values_flag(Side.LEFT, LevelSetKind.MOTOR_ZPP)
    neurological_level_of_injury_has_only_soft_values = _soft_values_flag(None, None)

    # ── AIS ───────────────────────────────────────────────────────────────
    def add_asia_impairment_scale_value(self, value: str) -> None:
        """Record a possible AIS grade; stored upper-cased, duplicates ignored."""
        if not value:
            logger.warning("add_asia_impairment_scale_value: empty AIS value")
            raise InvalidArgumentError(
                "add_asia_impairment_scale_value: Invalid arguments passed. Expected value:str",
                operation="add_asia_impairment_scale_value",
                argument="value",
            )
        value_to_upper = value.upper()
        if value_to_upper in self._asia_impairment_scale_values:
            return
        self._asia_impairment_scale_values.append(value_to_upper)

    def get_asia_impairment_scale_values(self) -> str:
        """AIS grades sorted alphabetically, comma separated, e.g. ``"A,C,E"``."""
        return ",".join(sorted(self._asia_impairment_scale_values))

    def is_asia_impairment_scale_empty(self) -> bool:
        return len(self._asia_impairment_scale_values) == 0

    # ── Raw subtotal fields ───────────────────────────────────────────────
    right_upper_motor_total = _subtotal_field(Side.RIGHT, SubtotalCategory.UPPER_MOTOR, "value")
    right_upper_motor_total_has_impairment_not_due_to_sci = _subtotal_field(
        Side.RIGHT, SubtotalCategory.UPPER_MOTOR, "has_impairment_not_due_to_sci")
    right_upper_motor_contains_nt = _subtotal_field(Side.RIGHT, SubtotalCategory.UPPER_MOTOR, "contains_nt")

    right_lower_motor_total = _subtotal_field(Side.RIGHT, SubtotalCategory.LOWER_MOTOR, "value")
    right_lower_motor_total_has_impairment_not_due_to_sci = _subtotal_field(
        Side.RIGHT, SubtotalCategory.LOWER_MOTOR, "has_impairment_not_due_to_sci")
    right_lower_motor_contains_nt = _subtotal_field(Side.RIGHT, SubtotalCategory.LOWER_MOTOR, "contains_nt")

    right_prick_total = _subtotal_field(Side.RIGHT, SubtotalCategory.PRICK, "value")
    right_prick_total_has_impairment_not_due_to_sci = _subtotal_field(
        Side.RIGHT, SubtotalCategory.PRICK, "has_impairment_not_due_to_sci")
    right_prick_contains_nt = _subtotal_field(Side.RIGHT, SubtotalCategory.PRICK, "contains_nt")

    right_touch_total = _subtotal_field(Side.RIGHT, SubtotalCategory.TOUCH, "value")
    right_touch_total_has_impairment_not_due_to_sci = _subtotal_field(
        Side.RIGHT, SubtotalCategory.TOUCH, "has_impairment_not_due_to_sci")
    right_touch_contains_nt = _subtotal_field(Side.RIGHT, SubtotalCategory.TOUCH, "contains_nt")

    left_upper_motor_total = _subtotal_field(Side.LEFT, SubtotalCategory.UPPER_MOTOR, "value")
    left_upper_motor_total_has_impairment_not_due_to_sci = _subtotal_field(
        Side.LEFT, SubtotalCategory.UPPER_MOTOR, "has_impairment_not_due_to_sci")
    left_upper_motor_contains_nt = _subtotal_field(Side.LEFT, SubtotalCategory.UPPER_MOTOR, "contains_nt")

    left_lower_motor_total = _subtotal_field(Side.LEFT, SubtotalCategory.LOWER_MOTOR, "value")
    left_lower_motor_total_has_impairment_not_due_to_sci = _subtotal_field(
        Side.LEFT, SubtotalCategory.LOWER_MOTOR, "has_impairment_not_due_to_sci")
    left_lower_motor_contains_nt = _subtotal_field(Side.LEFT, SubtotalCategory.LOWER_MOTOR, "contains_nt")

    left_prick_total = _subtotal_field(Side.LEFT, SubtotalCategory.PRICK, "value")
    left_prick_total_has_impairment_not_due_to_sci = _subtotal_field(
        Side.LEFT, SubtotalCategory.PRICK, "has_impairment_not_due_to_sci")
    left_prick_contains_nt = _subtotal_field(Side.LEFT, SubtotalCategory.PRICK, "contains_nt")

    left_touch_total = _subtotal_field(Side.LEFT, SubtotalCategory.TOUCH, "value")
    left_touch_total_has_impairment_not_due_to_sci = _subtotal_field(
        Side.LEFT, SubtotalCategory.TOUCH, "has_impairment_not_due_to_sci")
    left_touch_contains_nt = _subtotal_field(Side.LEFT, SubtotalCategory.TOUCH, "contains_nt")

    # ── Formatted totals ──────────────────────────────────────────────────
    get_right_upper_motor_total = _total_getter(
        "get_right_upper_motor_total", (Side.RIGHT, SubtotalCategory.UPPER_MOTOR))
    get_right_lower_motor_total = _total_getter(
        "get_right_lower_motor_total", (Side.RIGHT, SubtotalCategory.LOWER_MOTOR))
    get_right_prick_total = _total_getter("get_right_prick_total", (Side.RIGHT, SubtotalCategory.PRICK))
    get_right_touch_total = _total_getter("get_right_touch_total", (Side.RIGHT, SubtotalCategory.TOUCH))
    get_left_upper_motor_total = _total_getter(
        "get_left_upper_motor_total", (Side.LEFT, SubtotalCategory.UPPER_MOTOR))
    get_left_lower_motor_total = _total_getter(
        "get_left_lower_motor_total", (Side.LEFT, SubtotalCategory.LOWER_MOTOR))
    get_left_prick_total = _total_getter("get_left_prick_total", (Side.LEFT, SubtotalCategory.PRICK))
    get_left_touch_total = _total_getter("get_left_touch_total", (Side.LEFT, SubtotalCategory.TOUCH))

    # Composites: values are summed, flags OR-ed
    get_right_motor_total = _total_getter(
        "get_right_motor_total",
        (Side.RIGHT, SubtotalCategory.UPPER_MOTOR), (Side.RIGHT, SubtotalCategory.LOWER_MOTOR))
    get_left_motor_total = _total_getter(
        "get_left_motor_total",
        (Side.LEFT, SubtotalCategory.UPPER_MOTOR), (Side.LEFT, SubtotalCategory.LOWER_MOTOR))
    get_upper_motor_total = _total_getter(
        "get_upper_motor_total",
        (Side.RIGHT, SubtotalCategory.UPPER_MOTOR), (Side.LEFT, SubtotalCategory.UPPER_MOTOR))
    get_lower_motor_total = _total_getter(
        "get_lower_motor_total",
        (Side.RIGHT, SubtotalCategory.LOWER_MOTOR), (Side.LEFT, SubtotalCategory.LOWER_MOTOR))
    get_prick_total = _total_getter(
        "get_prick_total", (Side.RIGHT, SubtotalCategory.PRICK), (Side.LEFT, SubtotalCategory.PRICK))
    get_touch_total = _total_getter(
        "get_touch_total", (Side.RIGHT, SubtotalCategory.TOUCH), (Side.LEFT, SubtotalCategory.TOUCH))
    get_motor_total = _total_getter(
        "get_motor_total",
        (Side.RIGHT, SubtotalCategory.UPPER_MOTOR), (Side.RIGHT, SubtotalCategory.LOWER_MOTOR),
        (Side.LEFT, SubtotalCategory.UPPER_MOTOR), (Side.LEFT, SubtotalCategory.LOWER_MOTOR))

    # ── Serialisation ─────────────────────────────────────────────────────
    def formatted_totals(self) -> Dict[str, str]:
        """All raw and composite totals keyed by name, rendered."""
        return {name: getattr(self, f"get_{name}")() for name in TOTAL_NAMES}

    def to_report(self) -> TotalsReport:
        """Build the pydantic report model for API / JSON consumers."""
        report = build_totals_report(self)
        logger.debug(
            f"IsncsciTotals: report built, AIS [{report.asia_impairment_scale}], "
            f"NLI [{report.neurological_levels_of_injury}]"
        )
        return report

    def to_dict(self) -> dict:
        return self.to_report().model_dump()


TOTAL_NAMES: Tuple[str, ...] = (
    "right_upper_motor_total",
    "right_lower_motor_total",
    "right_prick_total",
    "right_touch_total",
    "left_upper_motor_total",
    "left_lower_motor_total",
    "left_prick_total",
    "left_touch_total",
    "right_motor_total",
    "left_motor_total",
    "upper_motor_total",
    "lower_motor_total",
    "prick_total",
    "touch_total",
    "motor_total",
)
