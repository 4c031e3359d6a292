"""
Tests for market curves.
"""

import dataclasses

import numpy as np
import pytest

from market_model.curves import LinearCurve, MarketCurve


class TestLinearCurve:
    """Test LinearCurve evaluation and immutability."""

    def test_evaluate_scalar(self, demand_curve, supply_curve):
        assert demand_curve.evaluate(0) == 100.0
        assert demand_curve.evaluate(18) == 64.0
        assert supply_curve.evaluate(18) == 64.0

    def test_evaluate_negative_quantity(self, demand_curve):
        """Any real quantity is accepted."""
        assert demand_curve.evaluate(-5) == 110.0

    def test_evaluate_array(self, supply_curve):
        q = np.array([0.0, 1.0, 2.0])
        np.testing.assert_allclose(supply_curve.evaluate(q), [10.0, 13.0, 16.0])

    def test_properties(self, demand_curve):
        assert demand_curve.name == "Demand"
        assert demand_curve.intercept == 100.0
        assert demand_curve.slope == -2.0

    def test_is_immutable(self, demand_curve):
        with pytest.raises(dataclasses.FrozenInstanceError):
            demand_curve.curve_slope = 5.0

    def test_implements_interface(self, demand_curve):
        assert isinstance(demand_curve, MarketCurve)

    def test_str(self, demand_curve, supply_curve):
        assert str(demand_curve) == "Demand: P = 100 - 2Q"
        assert str(supply_curve) == "Supply: P = 10 + 3Q"


def test_market_curve_is_abstract():
    with pytest.raises(TypeError):
        MarketCurve()
