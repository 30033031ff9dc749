"""Tests for validation rules."""

from decimal import Decimal

import pytest

from policy_desk.core.validation import (
    validate_non_negative,
    validate_policy,
    validate_required_text,
)
from policy_desk.models.policy import Policy


def test_validate_required_text() -> None:
    assert validate_required_text(" Toyota ", "Car brand") == "Toyota"
    with pytest.raises(ValueError):
        validate_required_text("   ", "Car brand")
    with pytest.raises(ValueError):
        validate_required_text(None, "Car brand")


def test_validate_non_negative() -> None:
    assert validate_non_negative(Decimal("0"), "TSI") == 0
    with pytest.raises(ValueError):
        validate_non_negative(Decimal("-0.5"), "Premium rate")


def test_validate_policy_trims_text_and_keeps_id() -> None:
    policy = Policy(
        id="POL-001",
        beneficiary_name=" John Doe ",
        car_brand="Toyota",
        car_type=" Camry",
        tsi=Decimal("25000"),
        premium_rate=Decimal("5"),
    )

    validated = validate_policy(policy)

    assert validated.id == "POL-001"
    assert validated.beneficiary_name == "John Doe"
    assert validated.car_type == "Camry"
    assert policy.beneficiary_name == " John Doe "
