"""
Fixed-point number formatting for reports and exports.

Values are rounded half-up on their shortest decimal representation,
so 2.125 prints as 2.13 and 1.005 as 1.01.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
import math


def format_fixed(value: float, places: int = 2) -> str:
    """
    Format a number with a fixed count of decimal places.

    Non-finite values print as 'Infinity', '-Infinity' or 'NaN'.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    with localcontext() as ctx:
        # Wide enough for every digit of the largest double
        ctx.prec = 320 + places
        quantum = Decimal(1).scaleb(-places)
        return str(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
