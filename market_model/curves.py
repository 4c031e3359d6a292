"""
Market Curve Module

Price functions for the demand and supply sides of a single market.

Architecture:
    MarketCurve (interface) -> LinearCurve (P = a + bQ)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

import numpy as np


QuantityLike = Union[float, np.ndarray]


class MarketCurve(ABC):
    """
    Abstract interface for a market price curve.

    The solver only needs a name, an intercept, a slope, and the
    ability to price a quantity.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Curve label (e.g., 'Demand', 'Supply')."""
        pass

    @property
    @abstractmethod
    def intercept(self) -> float:
        """Price at zero quantity."""
        pass

    @property
    @abstractmethod
    def slope(self) -> float:
        """Change in price per unit of quantity."""
        pass

    @abstractmethod
    def evaluate(self, quantity: QuantityLike) -> QuantityLike:
        """
        Price at the given quantity.

        Args:
            quantity: Scalar quantity or array of quantities

        Returns:
            Price (same shape as the input)
        """
        pass


@dataclass(frozen=True)
class LinearCurve(MarketCurve):
    """
    Linear price curve: P = intercept + slope * Q

    Demand curves carry a negative slope, supply curves a positive one.
    """
    curve_name: str
    curve_intercept: float
    curve_slope: float

    @property
    def name(self) -> str:
        return self.curve_name

    @property
    def intercept(self) -> float:
        return self.curve_intercept

    @property
    def slope(self) -> float:
        return self.curve_slope

    def evaluate(self, quantity: QuantityLike) -> QuantityLike:
        return self.curve_intercept + self.curve_slope * quantity

    def __str__(self) -> str:
        sign = "-" if self.curve_slope < 0 else "+"
        return f"{self.curve_name}: P = {self.curve_intercept:g} {sign} {abs(self.curve_slope):g}Q"
