"""
Pytest Configuration and Fixtures

Shared fixtures for the ISNCSCI totals tests.
"""
import pytest
from pathlib import Path
import sys

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from isncsci.core.levels import LEVELS
from isncsci.core.totals import IsncsciTotals, NeuroLevel


@pytest.fixture
def totals() -> IsncsciTotals:
    """A freshly constructed aggregator."""
    return IsncsciTotals()


@pytest.fixture
def levels() -> dict:
    """Canonical levels keyed by name (C1 = 0 ... S4_5 = 28)."""
    return dict(LEVELS)


@pytest.fixture
def s4_5() -> NeuroLevel:
    """The most caudal level, never part of a zone of partial preservation."""
    return LEVELS["S4_5"]
