"""
Reporting and Visualization Module

Formats equilibrium results as a console report and charts the market.
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from .curves import MarketCurve
from .equilibrium import EquilibriumResult
from .formatting import format_fixed

RULE = "=" * 43


class MarketReport:
    """
    Generate reports for one equilibrium analysis.
    """

    def __init__(self, result: EquilibriumResult):
        self.result = result

    def generate_text_report(self) -> str:
        """Generate the fixed-format text report."""
        r = self.result
        lines = []

        lines.append(RULE)
        lines.append(f"   ECONOMIC ANALYSIS REPORT (Tax: {r.tax})")
        lines.append(RULE)
        lines.append(f"Equilibrium Quantity (Q*): {format_fixed(r.quantity)}")
        lines.append(f"Equilibrium Price    (P*): {format_fixed(r.price)}")
        lines.append(f"Price Elasticity (PED):  {format_fixed(r.elasticity)} ({r.elasticity_label})")
        if r.tax > 0:
            lines.append(f"Deadweight Loss (DWL):   {format_fixed(r.deadweight_loss)}")
        lines.append(RULE)
        lines.append("")

        return "\n".join(lines)

    def plot_market(self,
                    demand: MarketCurve,
                    supply: MarketCurve,
                    save_path: Optional[str] = None,
                    show: bool = False) -> plt.Figure:
        """
        Chart demand, supply and the tax-shifted supply curve.

        The equilibrium point is marked, and the deadweight loss triangle
        is shaded when a tax applies.
        """
        r = self.result
        q_max = max(r.untaxed_quantity, r.quantity) * 1.5
        q = np.linspace(0, q_max, 200)

        fig, ax = plt.subplots(figsize=(9, 6))
        ax.plot(q, demand.evaluate(q), 'b-', linewidth=2, label=demand.name)
        ax.plot(q, supply.evaluate(q), 'g-', linewidth=2, label=supply.name)

        if r.tax > 0:
            ax.plot(q, supply.evaluate(q) + r.tax, 'g--', linewidth=1.5,
                    label=f"{supply.name} + tax ({r.tax:g})")

            q_lo, q_hi = sorted((r.quantity, r.untaxed_quantity))
            q_fill = np.linspace(q_lo, q_hi, 50)
            ax.fill_between(q_fill, demand.evaluate(q_fill), supply.evaluate(q_fill),
                            color='red', alpha=0.3, label='Deadweight loss')

        ax.plot([r.quantity], [r.price], 'ko')
        ax.annotate(f"Q*={r.quantity:.2f}, P*={r.price:.2f}",
                    xy=(r.quantity, r.price),
                    xytext=(5, 5),
                    textcoords="offset points",
                    fontsize=9)

        ax.set_xlabel('Quantity')
        ax.set_ylabel('Price')
        ax.set_title(f"Market Equilibrium (Tax: {r.tax:g})")
        ax.yaxis.set_major_formatter(mticker.StrMethodFormatter('${x:,.0f}'))
        ax.legend(loc='best')
        ax.grid(True, alpha=0.3)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')

        if show:
            plt.show()

        return fig
