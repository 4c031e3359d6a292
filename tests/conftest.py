"""
Pytest fixtures for market calculator tests.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from market_model.config import MarketConfig
from market_model.curves import LinearCurve
from market_model.equilibrium import MarketEngine


# =============================================================================
# CURVE FIXTURES
# =============================================================================

@pytest.fixture
def demand_curve():
    """Demand: P = 100 - 2Q."""
    return LinearCurve("Demand", 100.0, -2.0)


@pytest.fixture
def supply_curve():
    """Supply: P = 10 + 3Q."""
    return LinearCurve("Supply", 10.0, 3.0)


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def engine(demand_curve, supply_curve, tmp_path):
    """Engine on the textbook market, exporting into a temp directory."""
    return MarketEngine(demand_curve, supply_curve, export_path=str(tmp_path / "MarketData.csv"))


@pytest.fixture
def parallel_engine(tmp_path):
    """Demand and supply with identical slopes."""
    return MarketEngine(
        LinearCurve("Demand", 100.0, 3.0),
        LinearCurve("Supply", 10.0, 3.0),
        export_path=str(tmp_path / "MarketData.csv"),
    )


@pytest.fixture
def tmp_config(tmp_path):
    """Default scenarios with the export redirected to a temp file."""
    return MarketConfig(export_path=str(tmp_path / "MarketData.csv"))
