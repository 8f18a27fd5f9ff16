"""
ISNCSCI level table.

The canonical rostral-to-caudal sequence of neurological levels used by
the examination.  Ordinals are indices into LEVEL_NAMES.
"""
from typing import Dict, Tuple

from isncsci.core.totals.base import NeuroLevel
from isncsci.utils import InvalidArgumentError, UnknownLevelError

LEVEL_NAMES: Tuple[str, ...] = (
    "C1", "C2", "C3", "C4", "C5", "C6", "C7", "C8",
    "T1", "T2", "T3", "T4", "T5", "T6", "T7", "T8", "T9", "T10", "T11", "T12",
    "L1", "L2", "L3", "L4", "L5",
    "S1", "S2", "S3", "S4_5",
)
LEVEL_TO_ORDINAL: Dict[str, int] = {name: i for i, name in enumerate(LEVEL_NAMES)}

# Motor levels with key muscles (C5-T1, L2-S1)
MOTOR_LEVEL_NAMES: Tuple[str, ...] = ("C5", "C6", "C7", "C8", "T1", "L2", "L3", "L4", "L5", "S1")

LEVELS: Dict[str, NeuroLevel] = {name: NeuroLevel(name, i) for i, name in enumerate(LEVEL_NAMES)}


def get_level(name: str) -> NeuroLevel:
    """Look up a canonical level by name (case-insensitive)."""
    if not name:
        raise InvalidArgumentError(
            "get_level: Expected name:str", operation="get_level", argument="name"
        )
    try:
        return LEVELS[name.upper()]
    except KeyError:
        raise UnknownLevelError(name) from None


__all__ = ["LEVEL_NAMES", "LEVEL_TO_ORDINAL", "MOTOR_LEVEL_NAMES", "LEVELS", "get_level"]
