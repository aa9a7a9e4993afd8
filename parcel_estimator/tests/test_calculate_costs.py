"""
Unit Tests for Shipping Cost Calculator

Tests rate brackets, zone and speed multipliers, rounding, and the
documented scenarios.

Run with: pytest parcel_estimator/tests/test_calculate_costs.py -v
"""

import pytest
from decimal import Decimal

from parcel_estimator.calculate_costs import (
    ShippingSpeed,
    calculate_shipping_cost,
    get_base_rate,
    get_speed_multiplier,
    get_zone_multiplier,
    normalize_zone_code,
    quote_shipment,
    try_calculate_shipping_cost,
)
from parcel_estimator.errors import ErrorKind, InvalidArgument
from parcel_estimator.parcel import Parcel
from parcel_estimator.version import VERSION


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def cube_parcel():
    """10x10x10 in, 2 lbs: billable weight 8 (DIM), base rate 15.00."""
    return Parcel(10, 10, 10, 2)


def parcel_with_weight(weight) -> Parcel:
    """1x1x1 parcel (DIM weight 1) so billable weight follows actual weight."""
    return Parcel(1, 1, 1, Decimal(str(weight)))


# =============================================================================
# BASE RATE TESTS
# =============================================================================

class TestBaseRate:
    """Tests for the weight bracket step function."""

    @pytest.mark.parametrize("weight,expected", [
        ("0.1", "3.00"),
        ("1", "3.00"),
        ("1.01", "8.00"),
        ("5", "8.00"),
        ("5.01", "15.00"),
        ("20", "15.00"),
        ("20.5", "35.00"),
        ("50", "35.00"),
        ("50.01", "70.00"),
        ("150", "70.00"),
        ("1554", "70.00"),
    ])
    def test_bracket_boundaries(self, weight, expected):
        """Upper bounds are inclusive."""
        assert get_base_rate(Decimal(weight)) == Decimal(expected)

    def test_rate_keeps_cents(self):
        assert str(get_base_rate(Decimal("3"))) == "8.00"


# =============================================================================
# ZONE TESTS
# =============================================================================

class TestZoneMultiplier:
    """Tests for zone normalization and lookup."""

    @pytest.mark.parametrize("zone,expected", [
        ("1", "1.00"),
        ("2", "1.30"),
        ("3", "1.70"),
        ("4", "2.20"),
        ("5", "3.00"),
    ])
    def test_known_zones(self, zone, expected):
        assert get_zone_multiplier(zone) == Decimal(expected)

    def test_zone_is_trimmed(self):
        assert normalize_zone_code("  4 ") == "4"
        assert get_zone_multiplier("\t2\n") == Decimal("1.30")

    def test_integer_zone_accepted(self):
        assert get_zone_multiplier(3) == Decimal("1.70")

    @pytest.mark.parametrize("zone", ["9", "0", "6", "", "   ", "one", "1.0", "01", "A", None])
    def test_invalid_zones(self, zone):
        with pytest.raises(InvalidArgument) as exc:
            get_zone_multiplier(zone)
        assert exc.value.kind == ErrorKind.INVALID_ZONE
        assert str(exc.value) == "Invalid zone code. Must be 1-5"


# =============================================================================
# SPEED TESTS
# =============================================================================

class TestShippingSpeed:
    """Tests for speed parsing and multipliers."""

    def test_multipliers(self):
        assert get_speed_multiplier(ShippingSpeed.STANDARD) == Decimal("1.00")
        assert get_speed_multiplier(ShippingSpeed.EXPRESS) == Decimal("1.75")

    @pytest.mark.parametrize("text,expected", [
        ("Standard", ShippingSpeed.STANDARD),
        ("standard", ShippingSpeed.STANDARD),
        (" STANDARD ", ShippingSpeed.STANDARD),
        ("Express", ShippingSpeed.EXPRESS),
        ("eXpReSs", ShippingSpeed.EXPRESS),
    ])
    def test_parse(self, text, expected):
        assert ShippingSpeed.parse(text) is expected

    @pytest.mark.parametrize("text", ["", "Overnight", "Std", "0", "1", None])
    def test_parse_rejects_unknown(self, text):
        with pytest.raises(InvalidArgument) as exc:
            ShippingSpeed.parse(text)
        assert exc.value.kind == ErrorKind.INVALID_SPEED
        assert str(exc.value) == "Invalid shipping speed"

    def test_free_text_speed_accepted_by_lookup(self):
        assert get_speed_multiplier("express") == Decimal("1.75")

    @pytest.mark.parametrize("speed", ["Freight", 2, None])
    def test_lookup_rejects_values_outside_enum(self, speed):
        with pytest.raises(InvalidArgument) as exc:
            get_speed_multiplier(speed)
        assert exc.value.kind == ErrorKind.INVALID_SPEED


# =============================================================================
# COST CALCULATION TESTS
# =============================================================================

class TestCalculateShippingCost:
    """Tests for the total cost."""

    def test_zone_1_standard(self, cube_parcel):
        """15.00 x 1.00 x 1.00 = 15.00."""
        cost = calculate_shipping_cost(cube_parcel, "1", ShippingSpeed.STANDARD)
        assert cost == Decimal("15.00")
        assert str(cost) == "15.00"

    def test_zone_3_express_rounds_half_to_even(self, cube_parcel):
        """15.00 x 1.70 x 1.75 = 44.625 -> 44.62."""
        cost = calculate_shipping_cost(cube_parcel, "3", ShippingSpeed.EXPRESS)
        assert cost == Decimal("44.62")

    @pytest.mark.parametrize("weight,zone,speed,expected", [
        ("1", "2", ShippingSpeed.EXPRESS, "6.82"),      # 6.825, rounds down to even
        ("1", "3", ShippingSpeed.EXPRESS, "8.92"),      # 8.925
        ("30", "2", ShippingSpeed.EXPRESS, "79.62"),    # 79.625
        ("3", "4", ShippingSpeed.EXPRESS, "30.80"),
        ("100", "5", ShippingSpeed.EXPRESS, "367.50"),
        ("100", "5", ShippingSpeed.STANDARD, "210.00"),
        ("0.5", "1", ShippingSpeed.STANDARD, "3.00"),
    ])
    def test_rounding_contract(self, weight, zone, speed, expected):
        cost = calculate_shipping_cost(parcel_with_weight(weight), zone, speed)
        assert cost == Decimal(expected)
        assert cost.as_tuple().exponent == -2

    def test_invalid_zone_with_valid_parcel(self, cube_parcel):
        with pytest.raises(InvalidArgument, match="Invalid zone code"):
            calculate_shipping_cost(cube_parcel, "9", ShippingSpeed.STANDARD)

    def test_zone_error_reported_before_speed_error(self, cube_parcel):
        with pytest.raises(InvalidArgument) as exc:
            calculate_shipping_cost(cube_parcel, "9", "Overnight")
        assert exc.value.kind == ErrorKind.INVALID_ZONE

    def test_string_speed(self, cube_parcel):
        assert calculate_shipping_cost(cube_parcel, "3", "Express") == Decimal("44.62")

    def test_invalid_string_speed(self, cube_parcel):
        with pytest.raises(InvalidArgument, match="Invalid shipping speed"):
            calculate_shipping_cost(cube_parcel, "3", "Overnight")


# =============================================================================
# MONOTONICITY TESTS
# =============================================================================

class TestMonotonicity:
    """Cost never decreases as weight, zone or speed go up."""

    WEIGHTS = ["0.5", "1", "2", "5", "6", "20", "21", "50", "51", "150"]
    ZONES = ["1", "2", "3", "4", "5"]

    def test_non_decreasing_in_weight(self):
        for zone in self.ZONES:
            for speed in ShippingSpeed:
                costs = [
                    calculate_shipping_cost(parcel_with_weight(w), zone, speed)
                    for w in self.WEIGHTS
                ]
                assert costs == sorted(costs)

    def test_non_decreasing_in_zone(self):
        for w in self.WEIGHTS:
            for speed in ShippingSpeed:
                costs = [
                    calculate_shipping_cost(parcel_with_weight(w), zone, speed)
                    for zone in self.ZONES
                ]
                assert costs == sorted(costs)

    def test_express_never_cheaper(self):
        for w in self.WEIGHTS:
            parcel = parcel_with_weight(w)
            for zone in self.ZONES:
                standard = calculate_shipping_cost(parcel, zone, ShippingSpeed.STANDARD)
                express = calculate_shipping_cost(parcel, zone, ShippingSpeed.EXPRESS)
                assert express >= standard


# =============================================================================
# QUOTE AND RESULT TESTS
# =============================================================================

class TestQuoteShipment:
    """Tests for the cost breakdown."""

    def test_breakdown(self, cube_parcel):
        quote = quote_shipment(cube_parcel, " 3 ", ShippingSpeed.EXPRESS)
        assert quote.parcel is cube_parcel
        assert quote.zone == "3"
        assert quote.speed is ShippingSpeed.EXPRESS
        assert quote.base_rate == Decimal("15.00")
        assert quote.zone_multiplier == Decimal("1.70")
        assert quote.speed_multiplier == Decimal("1.75")
        assert quote.subtotal == Decimal("44.625")
        assert quote.total == Decimal("44.62")
        assert quote.calculator_version == VERSION


class TestTryCalculateShippingCost:
    """Tests for the non-raising cost calculation."""

    def test_success(self, cube_parcel):
        result = try_calculate_shipping_cost(cube_parcel, "1", ShippingSpeed.STANDARD)
        assert result.ok
        assert result.value == Decimal("15.00")

    def test_failure(self, cube_parcel):
        result = try_calculate_shipping_cost(cube_parcel, "9", ShippingSpeed.STANDARD)
        assert not result.ok
        assert result.error.kind == ErrorKind.INVALID_ZONE
        assert result.error.message == "Invalid zone code. Must be 1-5"
