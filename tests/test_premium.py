"""Tests for premium calculation."""

from decimal import Decimal

import pytest

from policy_desk.core.premium import calculate_premium, to_decimal


@pytest.mark.parametrize(
    ("tsi", "rate"),
    [
        (Decimal("25000"), Decimal("5")),
        (Decimal("22000"), Decimal("4.5")),
        (Decimal("150000000"), Decimal("2.75")),
        (Decimal("1"), Decimal("0.01")),
    ],
)
def test_premium_is_tsi_times_rate_over_hundred(tsi, rate) -> None:
    assert calculate_premium(tsi, rate) == tsi * rate / 100


def test_premium_zero_when_either_input_is_zero() -> None:
    assert calculate_premium(0, 7) == 0
    assert calculate_premium(50000, 0) == 0


def test_premium_accepts_numbers_and_numeric_strings() -> None:
    assert calculate_premium(25000, 5) == Decimal("1250")
    assert calculate_premium("22000", "4.5") == Decimal("990")
    assert calculate_premium(" 1000 ", 2.5) == Decimal("25")


@pytest.mark.parametrize("bad", [None, "", "abc", "12abc", float("nan"), "inf", True, object()])
def test_premium_treats_invalid_input_as_zero(bad) -> None:
    assert calculate_premium(bad, 5) == 0
    assert calculate_premium(25000, bad) == 0


def test_to_decimal_keeps_float_display_value() -> None:
    assert to_decimal(0.1) == Decimal("0.1")


def test_premium_out_of_decimal_range_is_zero() -> None:
    assert calculate_premium("1e999999", "1e999999") == 0
