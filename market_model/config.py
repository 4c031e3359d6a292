"""
Scenario configuration for the market calculator.

Contains:
- DEFAULT_TAX_RATES: Per-unit taxes analyzed by a default run
- DEFAULT_EXPORT_PATH: Where the price table is written
- MarketConfig: Named curve parameters and scenario settings
"""

from dataclasses import dataclass, field, replace
import logging
import math
from typing import Optional, Tuple

from .curves import LinearCurve

logger = logging.getLogger(__name__)


# Free market first, then a $10 per-unit tax
DEFAULT_TAX_RATES: Tuple[float, ...] = (0.0, 10.0)
DEFAULT_EXPORT_PATH = "MarketData.csv"


@dataclass(frozen=True)
class MarketConfig:
    """
    Parameters for one market and the tax scenarios to run against it.

    Demand: P = demand_intercept + demand_slope * Q
    Supply: P = supply_intercept + supply_slope * Q
    """
    demand_intercept: float = 100.0
    demand_slope: float = -2.0
    supply_intercept: float = 10.0
    supply_slope: float = 3.0

    tax_rates: Tuple[float, ...] = field(default=DEFAULT_TAX_RATES)
    export_path: str = DEFAULT_EXPORT_PATH
    # Optional chart per scenario, e.g. "market_tax_{tax:g}.png"
    chart_path: Optional[str] = None

    def __post_init__(self):
        for attr in ("demand_intercept", "demand_slope", "supply_intercept", "supply_slope"):
            value = getattr(self, attr)
            if not math.isfinite(value):
                raise ValueError(f"{attr} must be a finite number, got {value!r}")

        # Accept lists from callers but keep the stored value immutable
        object.__setattr__(self, "tax_rates", tuple(float(t) for t in self.tax_rates))
        if not self.tax_rates:
            raise ValueError("At least one tax scenario is required")
        for tax in self.tax_rates:
            if not math.isfinite(tax) or tax < 0:
                raise ValueError(f"Tax rates must be finite and non-negative, got {tax!r}")

        if not self.export_path:
            raise ValueError("export_path must not be empty")
        if self.chart_path is not None and "{tax" not in self.chart_path and len(self.tax_rates) > 1:
            logger.warning(f"chart_path {self.chart_path!r} has no {{tax}} field; each scenario overwrites the chart")

    @classmethod
    def default(cls) -> 'MarketConfig':
        """Demand P = 100 - 2Q, supply P = 10 + 3Q, taxes of 0 and 10."""
        return cls()

    def with_taxes(self, *tax_rates: float) -> 'MarketConfig':
        """Same curves, different tax scenarios."""
        return replace(self, tax_rates=tuple(tax_rates))

    def build_curves(self) -> Tuple[LinearCurve, LinearCurve]:
        """
        Build the demand and supply curves described by this config.

        Returns:
            (demand, supply) tuple
        """
        if self.demand_slope >= 0:
            logger.warning(f"Demand slope is {self.demand_slope}; demand curves normally slope down")
        if self.supply_slope <= 0:
            logger.warning(f"Supply slope is {self.supply_slope}; supply curves normally slope up")

        demand = LinearCurve("Demand", self.demand_intercept, self.demand_slope)
        supply = LinearCurve("Supply", self.supply_intercept, self.supply_slope)
        return demand, supply
