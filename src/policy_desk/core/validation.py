"""Input validation rules for policy drafts."""

from __future__ import annotations

from decimal import Decimal

from policy_desk.models.policy import Policy


def validate_required_text(value: str | None, field_name: str) -> str:
    """Validate non-empty text fields."""
    normalized = (value or "").strip()
    if not normalized:
        raise ValueError(f"{field_name} is required.")
    return normalized


def validate_non_negative(value: Decimal, field_name: str) -> Decimal:
    """Reject negative amounts and rates."""
    if value < 0:
        raise ValueError(f"{field_name} must not be negative.")
    return value


def validate_policy(draft: Policy) -> Policy:
    """Return a normalized copy of the draft or raise ValueError."""
    return draft.replace(
        beneficiary_name=validate_required_text(draft.beneficiary_name, "Beneficiary name"),
        car_brand=validate_required_text(draft.car_brand, "Car brand"),
        car_type=validate_required_text(draft.car_type, "Car type"),
        tsi=validate_non_negative(draft.tsi, "TSI"),
        premium_rate=validate_non_negative(draft.premium_rate, "Premium rate"),
    )
