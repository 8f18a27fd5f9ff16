"""
Package initializer for isncsci.
"""

__version__ = "1.0.0"

from isncsci.core.totals import IsncsciTotals, NeuroLevel, Side, SubtotalCategory
from isncsci.utils import InvalidArgumentError, IsncsciError

__all__ = [
    "__version__",
    "IsncsciTotals",
    "NeuroLevel",
    "Side",
    "SubtotalCategory",
    "InvalidArgumentError",
    "IsncsciError",
]
