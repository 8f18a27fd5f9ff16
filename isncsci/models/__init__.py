from .totals import ExtremalLevels, SideLevels, TotalsReport, build_totals_report

__all__ = ["ExtremalLevels", "SideLevels", "TotalsReport", "build_totals_report"]
