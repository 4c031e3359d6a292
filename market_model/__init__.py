"""
Market Equilibrium Calculator

Supply/demand equilibrium, price elasticity and tax deadweight loss
for linear market curves, with a console report and CSV price table.
"""

from .curves import MarketCurve, LinearCurve
from .config import MarketConfig, DEFAULT_TAX_RATES, DEFAULT_EXPORT_PATH
from .equilibrium import MarketEngine, EquilibriumResult, NoEquilibriumError
from .reporting import MarketReport
from .export import build_price_table, export_to_csv, TableTooLargeError
from .formatting import format_fixed
from .simulation import run_scenarios

__version__ = "1.0.0"
__all__ = [
    "MarketCurve",
    "LinearCurve",
    "MarketConfig",
    "DEFAULT_TAX_RATES",
    "DEFAULT_EXPORT_PATH",
    "MarketEngine",
    "EquilibriumResult",
    "NoEquilibriumError",
    "MarketReport",
    "build_price_table",
    "export_to_csv",
    "TableTooLargeError",
    "format_fixed",
    "run_scenarios",
]
