"""
Price table export.

Tabulates demand and tax-inclusive supply prices over a quantity grid
and writes them to a flat CSV file.
"""

import logging

import numpy as np
import pandas as pd

from .formatting import format_fixed

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ["Quantity", "DemandPrice", "SupplyPriceWithTax"]
QUANTITY_SPAN = 1.5
MAX_TABLE_ROWS = 1_000_000


class TableTooLargeError(ValueError):
    """Raised when the quantity grid would exceed MAX_TABLE_ROWS."""


def build_price_table(engine, quantity_limit: float, tax: float = 0.0) -> pd.DataFrame:
    """
    Price table for quantities 0, 1, 2, ... up to 1.5x the given limit.

    Args:
        engine: MarketEngine holding the demand and supply curves
        quantity_limit: Usually the equilibrium quantity
        tax: Per-unit tax added to the supply price

    Returns:
        DataFrame with Quantity, DemandPrice and SupplyPriceWithTax columns

    Raises:
        TableTooLargeError: if the grid has more than MAX_TABLE_ROWS rows
    """
    upper = max(np.floor(quantity_limit * QUANTITY_SPAN), -1.0)
    if not np.isfinite(upper) or upper + 1 > MAX_TABLE_ROWS:
        raise TableTooLargeError(
            f"Price table for quantity limit {quantity_limit:g} would need "
            f"{upper + 1:g} rows (max {MAX_TABLE_ROWS:,})"
        )
    quantities = np.arange(0.0, upper + 1.0)

    return pd.DataFrame({
        "Quantity": quantities,
        "DemandPrice": engine.demand.evaluate(quantities),
        "SupplyPriceWithTax": engine.supply.evaluate(quantities) + tax,
    }, columns=TABLE_COLUMNS)


def export_to_csv(table: pd.DataFrame, filepath: str) -> bool:
    """
    Write the price table with two-decimal fixed formatting.

    Returns:
        True if the file was written, False if the write failed
    """
    formatted = table.apply(lambda column: column.map(format_fixed))

    try:
        with open(filepath, "w", newline="") as fh:
            formatted.to_csv(fh, index=False, lineterminator="\n")
    except OSError as e:
        logger.error(f"Could not write price table to {filepath}: {e}")
        print(f"Export error: {e}")
        return False

    logger.info(f"Wrote {len(table)} rows to {filepath}")
    print(f"[System] Data exported to {filepath}")
    return True
