"""Unit tests for the pure helpers: distances, identifiers, phone numbers and money."""

# Standard library imports
from decimal import Decimal
import math
import re

# Third-party imports
import pytest

# Local application imports
from smartmunic.services.billing.voucher_services import to_cents
from smartmunic.utils.geo_utils import calculate_distance, parse_coordinate
from smartmunic.utils.reference_utils import generate_reference_number, generate_voucher_code
from smartmunic.utils.validators.phone_validator import mask_phone_number, validate_phone_number


class TestCalculateDistance:
    def test_same_point_is_zero(self):
        assert calculate_distance(-25.7461, 28.1881, -25.7461, 28.1881) == 0.0

    def test_pretoria_to_johannesburg(self):
        # Church Square to Johannesburg CBD is roughly 53 km
        distance = calculate_distance(-25.7461, 28.1881, -26.2041, 28.0473)
        assert 50 < distance < 58

    def test_symmetric(self):
        there = calculate_distance(-25.7461, 28.1881, -33.9249, 18.4241)
        back = calculate_distance(-33.9249, 18.4241, -25.7461, 28.1881)
        assert there == pytest.approx(back)

    def test_quarter_meridian(self):
        # Equator to pole along a meridian is a quarter of the circumference
        assert calculate_distance(0, 0, 90, 0) == pytest.approx(math.pi * 6371 / 2)

    def test_nan_propagates(self):
        assert math.isnan(calculate_distance(float("nan"), 28.0, -25.0, 28.0))


class TestParseCoordinate:
    @pytest.mark.parametrize("value", [None, "", "   ", "north", "nan", "inf"])
    def test_unusable_values(self, value):
        assert parse_coordinate(value) is None

    def test_numeric_string(self):
        assert parse_coordinate(" -25.7461 ") == -25.7461

    def test_float(self):
        assert parse_coordinate(28.1881) == 28.1881


class TestIdentifiers:
    def test_reference_number_format(self):
        reference = generate_reference_number()
        assert re.fullmatch(r"REF\d{4}[A-Z0-9]{6}", reference)

    def test_reference_numbers_differ(self):
        assert len({generate_reference_number() for _ in range(50)}) == 50

    def test_voucher_code_format(self):
        assert re.fullmatch(r"ELECTRICITY-\d+-[a-z0-9]{6}", generate_voucher_code("electricity"))


class TestPhoneNumbers:
    def test_local_number_normalised(self):
        assert validate_phone_number("082 123 4567") == "+27821234567"

    def test_international_without_plus(self):
        assert validate_phone_number("27821234567") == "+27821234567"

    def test_invalid_number(self):
        assert validate_phone_number("12345") is None

    def test_mask(self):
        assert mask_phone_number("+27821234567") == "+278******67"
        assert mask_phone_number(None) == "<none>"


class TestMoney:
    def test_to_cents_rounds_half_up(self):
        assert to_cents(Decimal("10.005")) == 1001
        assert to_cents(Decimal("99.99")) == 9999
