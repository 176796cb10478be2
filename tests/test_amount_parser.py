"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from famledger.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("100", Decimal("100")),
        ("123.45", Decimal("123.45")),
        ("  42.10 ", Decimal("42.10")),
        ("1,234.56", Decimal("1234.56")),
        ("₹250", Decimal("250")),
        ("$19.99", Decimal("19.99")),
        ("-5", Decimal("-5")),
        (100, Decimal("100")),
        (0.1, Decimal("0.1")),
        (Decimal("9.999"), Decimal("9.999")),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "abc", "12abc", "1.2.3", "(75.00)", "NaN", "Infinity", float("inf")])
def test_parse_amount_rejects_invalid(raw):
    with pytest.raises(ValueError):
        parse_amount(raw)


def test_parse_amount_rejects_booleans():
    """True is an int subclass but never a meaningful amount."""
    with pytest.raises(ValueError):
        parse_amount(True)


def test_parse_amount_rejects_other_types():
    with pytest.raises(ValueError):
        parse_amount(None)
