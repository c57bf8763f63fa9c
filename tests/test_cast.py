"""Tests for recordrules.cast module."""

import decimal
import math

import pytest

from recordrules.cast import to_number


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 0.0),
        ("", 0.0),
        ("   ", 0.0),
        (True, 1.0),
        (False, 0.0),
        (3, 3.0),
        (2.5, 2.5),
        (decimal.Decimal("1.25"), 1.25),
        (" 12.5 ", 12.5),
        ("-4", -4.0),
        ("1e3", 1000.0),
        (b"7", 7.0),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
        ("0x1F", 31.0),
        ("0b101", 5.0),
        ("0o17", 15.0),
        (".5", 0.5),
        ("5.", 5.0),
    ],
)
def test_to_number(value, expected):
    """Test to_number reads numeric form values."""
    assert to_number(value) == expected


@pytest.mark.parametrize(
    "value",
    ["abc", "12px", "1_000", "inf", "-inf", "nan", "NaN", "infinity", "-0x10", [], {}, object()],
)
def test_to_number_nan(value):
    """Test values JavaScript would not read as numbers give NaN."""
    assert math.isnan(to_number(value))
