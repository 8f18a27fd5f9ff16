"""
ISNCSCI Totals: Base Types

Value types shared by the totals aggregator and its callers.  The
classification algorithm produces these; the aggregator only stores,
combines and renders them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

Number = Union[int, float]


class Side(str, Enum):
    """Body side of a tracked quantity."""
    RIGHT = "right"
    LEFT  = "left"


class LevelSetKind(str, Enum):
    """
    Category of a candidate-level set.

    SENSORY      – possible sensory levels
    MOTOR        – possible motor levels (extremal pair tracked)
    SENSORY_ZPP  – sensory zone of partial preservation (S4_5 excluded)
    MOTOR_ZPP    – motor zone of partial preservation (S4_5 excluded)
    """
    SENSORY     = "sensory"
    MOTOR       = "motor"
    SENSORY_ZPP = "sensory_zpp"
    MOTOR_ZPP   = "motor_zpp"


class SubtotalCategory(str, Enum):
    """One of the four per-side raw subtotal slots."""
    UPPER_MOTOR = "upper_motor"
    LOWER_MOTOR = "lower_motor"
    PRICK       = "prick"
    TOUCH       = "touch"


@dataclass(frozen=True)
class NeuroLevel:
    """
    A neurological level on the rostral-caudal axis.

    Lower ordinals are more rostral (towards the head); S4_5 is the most
    caudal level.
    """
    name: str       # e.g. "C4", "T12", "S4_5"
    ordinal: int    # rank along the rostral-caudal axis

    @property
    def key(self) -> str:
        """Name used for duplicate detection."""
        return self.name.upper()

    def __str__(self) -> str:
        return self.name


@dataclass
class SubtotalFacts:
    """
    A raw subtotal together with the flags that drive its rendering.

    value                           – numeric subtotal
    has_impairment_not_due_to_sci   – some input shows impairment unrelated to the SCI
    contains_nt                     – some input was Not Testable
    """
    value: Number = 0
    has_impairment_not_due_to_sci: bool = False
    contains_nt: bool = False

    def __add__(self, other: "SubtotalFacts") -> "SubtotalFacts":
        if not isinstance(other, SubtotalFacts):
            return NotImplemented
        return SubtotalFacts(
            value=self.value + other.value,
            has_impairment_not_due_to_sci=(
                self.has_impairment_not_due_to_sci or other.has_impairment_not_due_to_sci
            ),
            contains_nt=self.contains_nt or other.contains_nt,
        )

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "has_impairment_not_due_to_sci": self.has_impairment_not_due_to_sci,
            "contains_nt": self.contains_nt,
        }
