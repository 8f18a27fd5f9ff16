"""
Candidate Level Sets

One generic container backs every candidate-level list on the totals
object, so the add / contains / render contract is identical for the
sensory, motor, ZPP and neurological-level-of-injury sets.
"""
from __future__ import annotations

from typing import FrozenSet, List, Optional

from isncsci.utils import InvalidArgumentError, get_logger
from .base import NeuroLevel
from .formatting import contains_level_with_name, get_values_string

logger = get_logger(__name__)

# Zone of partial preservation is only reported above S4_5
ZPP_EXCLUDED_LEVELS: FrozenSet[str] = frozenset({"S4_5"})


class CandidateLevels:
    """
    Insertion-ordered set of NeuroLevels, unique by upper-cased name.

    Args:
        label: Human-readable name used in logs and error details,
               e.g. ``"right_motor"``.
        track_extremes: Keep the most rostral / most caudal level seen.
        excluded_names: Level names (any case) that are silently dropped on add.
    """

    def __init__(
        self,
        label: str,
        track_extremes: bool = False,
        excluded_names: FrozenSet[str] = frozenset(),
    ):
        self.label = label
        self.track_extremes = track_extremes
        self.excluded_names = frozenset(name.upper() for name in excluded_names)
        self.has_only_soft_values = True
        self.most_rostral: Optional[NeuroLevel] = None
        self.most_caudal: Optional[NeuroLevel] = None
        self._levels: List[NeuroLevel] = []

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self):
        return iter(list(self._levels))

    def __repr__(self) -> str:
        return f"CandidateLevels({self.label!r}, {[level.name for level in self._levels]})"

    def add(self, level: Optional[NeuroLevel], operation: str = "add") -> None:
        """
        Add ``level`` unless it is excluded or its name is already present.

        The first instance of a name wins; a later level with the same name
        and a different ordinal is ignored.
        """
        if level is None:
            logger.warning(f"{operation}: missing expected argument level for {self.label}")
            raise InvalidArgumentError(
                f"{operation}: Invalid arguments passed. Expected level:NeuroLevel",
                operation=operation,
                argument="level",
            )

        if level.key in self.excluded_names:
            logger.debug(f"{self.label}: {level.name} is never reported here, dropped")
            return

        if contains_level_with_name(self._levels, level.name):
            logger.debug(f"{self.label}: {level.name} already recorded, skipping")
            return

        if self.track_extremes:
            self._tighten_extremes(level)

        self._levels.append(level)

    def _tighten_extremes(self, level: NeuroLevel) -> None:
        # Strict comparisons: on ties the first level seen is kept
        if self.most_rostral is None or level.ordinal < self.most_rostral.ordinal:
            logger.debug(f"{self.label}: most rostral -> {level.name}")
            self.most_rostral = level
        if self.most_caudal is None or level.ordinal > self.most_caudal.ordinal:
            logger.debug(f"{self.label}: most caudal -> {level.name}")
            self.most_caudal = level

    def contains(self, level_name: str, operation: str = "contains") -> bool:
        if not level_name:
            logger.warning(f"{operation}: empty level name for {self.label}")
            raise InvalidArgumentError(
                f"{operation}: Invalid arguments passed. Expected levelName:str",
                operation=operation,
                argument="level_name",
            )
        return contains_level_with_name(self._levels, level_name)

    def is_empty(self) -> bool:
        return len(self._levels) == 0

    def values(self) -> List[NeuroLevel]:
        """Copy of the recorded levels in insertion order."""
        return list(self._levels)

    def long_value_string(self) -> str:
        return get_values_string(self._levels)
