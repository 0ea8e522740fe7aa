"""
Tests for rupee formatting and minor-unit conversion.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from autocare.application.utils.currency import format_price, to_minor_units


def test_format_price_truncates_to_whole_rupees():
    assert format_price(19900) == "₹199"
    assert format_price(23482) == "₹234"
    assert format_price(0) == "₹0"
    assert format_price(99) == "₹0"


def test_format_price_with_custom_symbol():
    assert format_price(150000, symbol="Rs.") == "Rs.1500"


def test_to_minor_units():
    assert to_minor_units("150.50") == 15050
    assert to_minor_units(150) == 15000
    assert to_minor_units(Decimal("0.01")) == 1
    assert to_minor_units(" 20 ") == 2000


def test_to_minor_units_floors_fractional_paise():
    assert to_minor_units("1.005") == 100


@pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity"])
def test_to_minor_units_rejects_non_numbers(value):
    with pytest.raises(ValueError):
        to_minor_units(value)


@pytest.mark.parametrize("value", ["1e999999999", "-1e5000"])
def test_to_minor_units_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        to_minor_units(value)


def test_to_minor_units_ceiling():
    assert to_minor_units("1e999999999", ceiling=10000) == 10000
    assert to_minor_units("100", ceiling=10000) == 10000
    assert to_minor_units("99.99", ceiling=10000) == 9999
