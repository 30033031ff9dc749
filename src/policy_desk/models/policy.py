"""Policy domain model and its JSON mapping."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from policy_desk.core.premium import calculate_premium, to_decimal

PolicyId = int | str


def _parse_date(value: Any) -> date | None:
    """Accept YYYY-MM-DD or a full ISO timestamp and keep the date portion."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).split("T")[0])
    except ValueError:
        return None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _add_one_year(start: date) -> date:
    try:
        return start.replace(year=start.year + 1)
    except ValueError:
        # 29 February
        return start.replace(year=start.year + 1, day=28)


@dataclass
class Policy:
    """Auto-insurance policy record.

    ``id`` is ``None`` for a draft that has not been accepted by the backend.
    ``premium_amount`` is derived from ``tsi`` and ``premium_rate`` on every
    read and is never stored.
    """

    beneficiary_name: str = ""
    car_brand: str = ""
    car_type: str = ""
    tsi: Decimal = field(default_factory=lambda: Decimal("0"))
    premium_rate: Decimal = field(default_factory=lambda: Decimal("0"))
    start_date: date | None = None
    end_date: date | None = None
    id: PolicyId | None = None
    policy_number: str | None = None

    @property
    def premium_amount(self) -> Decimal:
        return calculate_premium(self.tsi, self.premium_rate)

    @property
    def is_draft(self) -> bool:
        return self.id is None

    @classmethod
    def new_draft(cls, today: date | None = None) -> "Policy":
        """Blank draft covering one year from today."""
        start = today or date.today()
        return cls(start_date=start, end_date=_add_one_year(start))

    def replace(self, **changes: Any) -> "Policy":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Policy":
        """Build a policy from the API's JSON object. premiumAmount is ignored."""
        return cls(
            id=payload.get("id"),
            policy_number=payload.get("policyNumber"),
            beneficiary_name=_text(payload.get("beneficiaryName")),
            car_brand=_text(payload.get("carBrand")),
            car_type=_text(payload.get("carType")),
            tsi=to_decimal(payload.get("tsi")),
            premium_rate=to_decimal(payload.get("premiumRate")),
            start_date=_parse_date(payload.get("startDate")),
            end_date=_parse_date(payload.get("endDate")),
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for POST/PUT. Drafts are sent without an id."""
        payload: dict[str, Any] = {
            "beneficiaryName": self.beneficiary_name,
            "carBrand": self.car_brand,
            "carType": self.car_type,
            "tsi": float(self.tsi),
            "premiumRate": float(self.premium_rate),
            "premiumAmount": float(self.premium_amount),
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
        }
        if self.id is not None:
            payload["id"] = self.id
        if self.policy_number is not None:
            payload["policyNumber"] = self.policy_number
        return payload
