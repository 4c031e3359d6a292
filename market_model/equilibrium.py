"""
Market Equilibrium Engine

Solves for the equilibrium of a demand curve and a (possibly taxed)
supply curve, and measures elasticity and the deadweight loss of the tax.

Algebra for linear curves with a per-unit tax t levied on sellers:
    a + bQ = c + dQ + t  =>  Q* = (c - a + t) / (b - d)
"""

from dataclasses import dataclass, asdict
import logging
from typing import Optional

import numpy as np

from .config import DEFAULT_EXPORT_PATH
from .curves import MarketCurve

logger = logging.getLogger(__name__)

ELASTICITY_THRESHOLD = 1.0


class NoEquilibriumError(ValueError):
    """Raised when the curves have no positive, finite intersection."""


@dataclass(frozen=True)
class EquilibriumResult:
    """
    Outcome of one equilibrium analysis.
    """
    tax: float
    quantity: float          # Q* with the tax applied
    price: float             # Demand price at Q* (what buyers pay)
    elasticity: float        # |(1/b) * (P*/Q*)|
    deadweight_loss: float   # 0.5 * t * |Q_notax - Q*|
    untaxed_quantity: float  # Q* with no tax, reference for the DWL

    @property
    def is_elastic(self) -> bool:
        return self.elasticity > ELASTICITY_THRESHOLD

    @property
    def elasticity_label(self) -> str:
        return "Elastic" if self.is_elastic else "Inelastic"

    @property
    def quantity_reduction(self) -> float:
        """Units of trade lost to the tax."""
        return abs(self.untaxed_quantity - self.quantity)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["elasticity_label"] = self.elasticity_label
        return data


class MarketEngine:
    """
    Core market engine: equilibrium, elasticity and taxation.

    Works on any MarketCurve pair; only the intercept, slope and
    evaluate() of each curve are used.
    """

    def __init__(self, demand: MarketCurve, supply: MarketCurve,
                 export_path: str = DEFAULT_EXPORT_PATH,
                 chart_path: Optional[str] = None):
        self.demand = demand
        self.supply = supply
        self.export_path = export_path
        # Format string with a {tax} field, e.g. "market_tax_{tax:g}.png"
        self.chart_path = chart_path

    def equilibrium_quantity(self, tax: float = 0.0) -> float:
        """
        Quantity at which demand meets the tax-shifted supply curve.

        Raises:
            NoEquilibriumError: if the curves are parallel
        """
        slope_gap = self.demand.slope - self.supply.slope
        if slope_gap == 0:
            raise NoEquilibriumError(
                f"{self.demand.name} and {self.supply.name} curves are parallel "
                f"(slope {self.demand.slope}); equilibrium is undefined"
            )
        return (self.supply.intercept - self.demand.intercept + tax) / slope_gap

    def analyze(self, tax: float = 0.0) -> EquilibriumResult:
        """
        Compute equilibrium, elasticity and deadweight loss for a per-unit tax.

        Args:
            tax: Per-unit tax added to the supply price

        Returns:
            EquilibriumResult

        Raises:
            NoEquilibriumError: if there is no positive, finite equilibrium
        """
        q_star = self.equilibrium_quantity(tax)
        if not np.isfinite(q_star) or q_star <= 0:
            raise NoEquilibriumError(f"Equilibrium quantity {q_star} is not positive (tax={tax})")

        p_star = float(self.demand.evaluate(q_star))

        # PED = |(1/slope) * (P/Q)|; a flat demand curve is perfectly elastic
        if self.demand.slope == 0:
            elasticity = np.inf
        else:
            elasticity = abs((1 / self.demand.slope) * (p_star / q_star))

        # Simplified triangle: 0.5 * tax * change in quantity
        q_initial = self.equilibrium_quantity(0.0)
        dwl = 0.5 * tax * abs(q_initial - q_star)

        return EquilibriumResult(
            tax=float(tax),
            quantity=float(q_star),
            price=p_star,
            elasticity=float(elasticity),
            deadweight_loss=float(dwl),
            untaxed_quantity=float(q_initial),
        )

    def run_analysis(self, tax: float = 0.0) -> Optional[EquilibriumResult]:
        """
        Analyze one tax scenario, print the report and export the price table.

        A market without a positive equilibrium is reported and skipped;
        nothing is exported for it. Export and chart failures are reported
        and do not stop the analysis.
        """
        from .export import TableTooLargeError, build_price_table, export_to_csv
        from .reporting import MarketReport

        try:
            result = self.analyze(tax)
        except NoEquilibriumError as e:
            logger.warning(f"Skipping analysis: {e}")
            print("Market Error: No positive equilibrium found.")
            return None

        report = MarketReport(result)
        print(report.generate_text_report())

        try:
            table = build_price_table(self, result.quantity, tax)
        except TableTooLargeError as e:
            logger.error(f"Skipping export: {e}")
            print(f"Export error: {e}")
        else:
            export_to_csv(table, self.export_path)

        if self.chart_path:
            self._save_chart(report, tax)

        return result

    def _save_chart(self, report, tax: float) -> bool:
        import matplotlib.pyplot as plt

        save_path = self.chart_path.format(tax=tax)
        try:
            fig = report.plot_market(self.demand, self.supply, save_path=save_path)
        except OSError as e:
            logger.error(f"Could not save chart to {save_path}: {e}")
            print(f"Chart error: {e}")
            plt.close("all")
            return False

        plt.close(fig)
        print(f"[System] Chart saved to {save_path}")
        return True
