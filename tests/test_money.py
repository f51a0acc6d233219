"""Tests for money helpers"""
from decimal import Decimal

from shopcart.services.money import format_money, multiply, round_money, to_decimal, to_float, total


def test_to_decimal_float_keeps_written_value():
    """Floats convert through their string form"""
    assert to_decimal(109.95) == Decimal("109.95")
    assert to_decimal(None) == Decimal("0")
    assert to_decimal("not a number") == Decimal("0")


def test_round_money_half_up():
    assert round_money("2.345") == Decimal("2.35")
    assert round_money(Decimal("2.344")) == Decimal("2.34")


def test_format_money_usd():
    assert format_money(Decimal("20")) == "$20.00"
    assert format_money(Decimal("1234.5")) == "$1,234.50"
    assert format_money(0) == "$0.00"


def test_total_of_empty_is_zero():
    assert total([]) == Decimal("0")
    assert total([Decimal("1.10"), 2.2]) == Decimal("3.30")


def test_to_float():
    assert to_float(Decimal("7.50")) == 7.5


def test_large_amounts_keep_cents():
    """Amounts past the default 28-digit context still round and format"""
    rounded = round_money(Decimal("1e30"))
    assert rounded == Decimal("1e30")
    assert rounded.as_tuple().exponent == -2
    assert format_money(1e30) == "$1" + ",000" * 10 + ".00"

    assert multiply(Decimal("0.01"), 10**30 + 1) == Decimal("1" + "0" * 28 + ".01")
    assert total([Decimal("1e30"), Decimal("0.01")]) == Decimal("1" + "0" * 30 + ".01")
