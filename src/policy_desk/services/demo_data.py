"""Built-in sample policies shown when the backend cannot be reached."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from policy_desk.models.policy import Policy


def demo_policies() -> list[Policy]:
    """Return a fresh copy of the two demonstration records."""
    return [
        Policy(
            id="POL-001",
            beneficiary_name="John Doe",
            car_brand="Toyota",
            car_type="Camry",
            tsi=Decimal("25000"),
            premium_rate=Decimal("5"),
            start_date=date(2024, 1, 1),
            end_date=date(2024, 12, 31),
        ),
        Policy(
            id="POL-002",
            beneficiary_name="Jane Smith",
            car_brand="Honda",
            car_type="Civic",
            tsi=Decimal("22000"),
            premium_rate=Decimal("4.5"),
            start_date=date(2024, 2, 15),
            end_date=date(2025, 2, 14),
        ),
    ]
