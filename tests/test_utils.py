import math
from decimal import Decimal

import pytest

from inventory_assistant.utils import format_quantity, normalize_message, round_half_up, safe_number


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 0.0),
        (7, 7.0),
        (2.5, 2.5),
        ("5,00", 5.0),
        ("€ 1.234", 1.234),
        (" 12 ", 12.0),
        ("€12,5", 12.5),
        ("12abc", 12.0),
        ("abc", 0.0),
        ("", 0.0),
        ("-3", -3.0),
        (True, 0.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        ("1e999", 0.0),
    ],
)
def test_safe_number(value, expected):
    assert safe_number(value) == expected


def test_safe_number_only_replaces_first_comma():
    # "1,234,5" -> "1.234,5" -> prefix "1.234"
    assert safe_number("1,234,5") == 1.234


def test_safe_number_extra_currency_glyph():
    assert safe_number("$ 9,99", ("€", "$")) == 9.99


@pytest.mark.parametrize("value", [None, "5,00", "abc", "€ 3", -1, 4.75, [1, 2], {"a": 1}, object()])
def test_safe_number_is_total_and_idempotent(value):
    once = safe_number(value)
    assert math.isfinite(once)
    assert safe_number(once) == once


def test_format_quantity():
    assert format_quantity(5.0) == "5"
    assert format_quantity(2.5) == "2.5"
    assert format_quantity(0.0) == "0"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4) == 2
    assert round_half_up(-2.5) == -2


def test_normalize_message():
    assert normalize_message("Show LOW Stock") == "show low stock"
    assert normalize_message(None) == ""


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("12.50"), 12.5),
        (Decimal("-3"), -3.0),
        (Decimal("NaN"), 0.0),
        (Decimal("sNaN"), 0.0),
        (Decimal("Infinity"), 0.0),
    ],
)
def test_safe_number_passes_decimals_through(value, expected):
    assert safe_number(value) == expected
