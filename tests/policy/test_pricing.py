# tests/policy/test_pricing.py
import itertools

import pytest

from ride_match.app.protocols import PricingStrategy
from ride_match.policy.pricing import EcoPricing, StandardPricing, SurgePricing

GRID = [0.0, 0.01, 0.5, 1.0, 5.0, 12.3, 80.0]


def test_standard_formula():
    p = StandardPricing()
    assert p.calculate_fare(0.0, 0.0) == pytest.approx(2.50)
    assert p.calculate_fare(5.0, 7.5) == pytest.approx(2.50 + 6.25 + 2.625)
    assert p.name == "Standard"


def test_standard_is_monotone_in_distance_and_duration():
    p = StandardPricing()
    for d1, d2 in itertools.pairwise(GRID):
        for m in GRID:
            assert p.calculate_fare(d1, m) <= p.calculate_fare(d2, m)
            assert p.calculate_fare(m, d1) <= p.calculate_fare(m, d2)


@pytest.mark.parametrize("multiplier", [1.0, 1.8, 2.5, 0.5])
def test_surge_is_multiple_of_standard(multiplier):
    std, surge = StandardPricing(), SurgePricing(multiplier)
    for d, m in itertools.product(GRID, GRID):
        assert surge.calculate_fare(d, m) == std.calculate_fare(d, m) * multiplier


def test_surge_name_carries_multiplier():
    assert SurgePricing(1.8).name == "Surge x1.8"
    assert SurgePricing(2).name == "Surge x2"


def test_surge_does_not_validate_multiplier():
    # non-positive multipliers are accepted by the strategy itself
    assert SurgePricing(0.0).calculate_fare(5.0, 7.5) == 0.0
    assert SurgePricing(-1.0).calculate_fare(0.0, 0.0) == pytest.approx(-2.50)


def test_eco_is_floored_and_never_above_standard():
    std, eco = StandardPricing(), EcoPricing()
    for d, m in itertools.product(GRID, GRID):
        fare = eco.calculate_fare(d, m)
        assert fare >= 5.00
        # the floor can exceed a very cheap standard fare; otherwise eco is cheaper
        if std.calculate_fare(d, m) >= 5.00:
            assert fare <= std.calculate_fare(d, m)


def test_eco_discount_and_floor_values():
    eco = EcoPricing()
    assert eco.calculate_fare(0.0, 0.0) == 5.00
    assert eco.calculate_fare(10.0, 15.0) == pytest.approx((2.50 + 12.5 + 5.25) * 0.9)
    assert eco.name == "Eco (10% off)"


def test_strategies_satisfy_protocol():
    for p in (StandardPricing(), SurgePricing(1.5), EcoPricing()):
        assert isinstance(p, PricingStrategy)
