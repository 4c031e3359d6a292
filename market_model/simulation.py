"""
Scenario runner for the market calculator.

Runs every configured tax scenario against one pair of curves.
"""

import logging
from typing import List, Optional

from .config import MarketConfig
from .equilibrium import EquilibriumResult, MarketEngine
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_engine(config: MarketConfig) -> MarketEngine:
    demand, supply = config.build_curves()
    return MarketEngine(demand, supply,
                        export_path=config.export_path,
                        chart_path=config.chart_path)


def run_scenarios(config: Optional[MarketConfig] = None) -> List[Optional[EquilibriumResult]]:
    """
    Analyze each tax scenario in order.

    Args:
        config: Market parameters; defaults to MarketConfig.default()

    Returns:
        One entry per tax rate, None where no positive equilibrium exists
    """
    config = config or MarketConfig.default()
    engine = build_engine(config)
    logger.info(f"Running {len(config.tax_rates)} scenario(s): {engine.demand} | {engine.supply}")

    return [engine.run_analysis(tax) for tax in config.tax_rates]


def main():
    configure_logging()
    run_scenarios(MarketConfig.default())


if __name__ == "__main__":
    main()
