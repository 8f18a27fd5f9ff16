"""
Pydantic response models for a populated IsncsciTotals.
"""
from __future__ import annotations

from typing import Dict, Optional, TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from isncsci.core.totals.aggregator import IsncsciTotals


class SideLevels(BaseModel):
    """Candidate levels for one side, rendered as ordinal-ordered strings."""
    sensory: str = ""
    motor: str = ""
    sensory_zpp: str = ""
    motor_zpp: str = ""


class ExtremalLevels(BaseModel):
    """Most rostral / most caudal level names (None until a level is recorded)."""
    most_rostral: Optional[str] = None
    most_caudal: Optional[str] = None


class TotalsReport(BaseModel):
    """Reporting view of one examination's totals."""
    asia_impairment_scale: str = Field("", description="AIS grades, e.g. 'A,C'")
    neurological_levels_of_injury: str = ""
    right: SideLevels = Field(default_factory=SideLevels)
    left: SideLevels = Field(default_factory=SideLevels)
    right_motor_extremes: ExtremalLevels = Field(default_factory=ExtremalLevels)
    left_motor_extremes: ExtremalLevels = Field(default_factory=ExtremalLevels)
    neurological_level_of_injury_extremes: ExtremalLevels = Field(default_factory=ExtremalLevels)
    totals: Dict[str, str] = Field(default_factory=dict, description="Rendered subtotals by name")
    has_right_collins: bool = False
    has_left_collins: bool = False


def _name_or_none(level) -> Optional[str]:
    return level.name if level is not None else None


def build_totals_report(totals: "IsncsciTotals") -> TotalsReport:
    return TotalsReport(
        asia_impairment_scale=totals.get_asia_impairment_scale_values(),
        neurological_levels_of_injury=totals.get_neurological_levels_of_injury_long_value_string(),
        right=SideLevels(
            sensory=totals.get_right_sensory_long_value_string(),
            motor=totals.get_right_motor_long_value_string(),
            sensory_zpp=totals.get_right_sensory_zpp_long_value_string(),
            motor_zpp=totals.get_right_motor_zpp_long_value_string(),
        ),
        left=SideLevels(
            sensory=totals.get_left_sensory_long_value_string(),
            motor=totals.get_left_motor_long_value_string(),
            sensory_zpp=totals.get_left_sensory_zpp_long_value_string(),
            motor_zpp=totals.get_left_motor_zpp_long_value_string(),
        ),
        right_motor_extremes=ExtremalLevels(
            most_rostral=_name_or_none(totals.most_rostral_right_motor),
            most_caudal=_name_or_none(totals.most_caudal_right_motor),
        ),
        left_motor_extremes=ExtremalLevels(
            most_rostral=_name_or_none(totals.most_rostral_left_motor),
            most_caudal=_name_or_none(totals.most_caudal_left_motor),
        ),
        neurological_level_of_injury_extremes=ExtremalLevels(
            most_rostral=_name_or_none(totals.most_rostral_neurological_level_of_injury),
            most_caudal=_name_or_none(totals.most_caudal_neurological_level_of_injury),
        ),
        totals=totals.formatted_totals(),
        has_right_collins=totals.has_right_collins,
        has_left_collins=totals.has_left_collins,
    )
