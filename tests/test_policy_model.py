"""Tests for the policy model and its JSON mapping."""

from datetime import date
from decimal import Decimal

from policy_desk.models.policy import Policy


def test_from_payload_keeps_date_portion_and_ignores_premium_amount() -> None:
    policy = Policy.from_payload(
        {
            "id": 3,
            "policyNumber": "PN-0003",
            "beneficiaryName": "Dewi",
            "carBrand": "Toyota",
            "carType": "Avanza",
            "tsi": 200000000,
            "premiumRate": 2.5,
            "premiumAmount": 999,
            "startDate": "2024-03-01T00:00:00",
            "endDate": "2025-02-28",
        }
    )

    assert policy.id == 3
    assert policy.policy_number == "PN-0003"
    assert policy.start_date == date(2024, 3, 1)
    assert policy.end_date == date(2025, 2, 28)
    assert policy.premium_amount == Decimal("5000000")


def test_from_payload_tolerates_missing_and_bad_values() -> None:
    policy = Policy.from_payload({"tsi": "n/a", "startDate": "soon"})

    assert policy.id is None
    assert policy.beneficiary_name == ""
    assert policy.tsi == 0
    assert policy.start_date is None
    assert policy.premium_amount == 0


def test_premium_amount_follows_inputs() -> None:
    policy = Policy(tsi=Decimal("25000"), premium_rate=Decimal("5"))
    assert policy.premium_amount == Decimal("1250")

    policy.tsi = Decimal("30000")
    assert policy.premium_amount == Decimal("1500")


def test_draft_payload_has_no_id() -> None:
    draft = Policy(
        beneficiary_name="X",
        car_brand="Y",
        car_type="Z",
        tsi=Decimal("25000"),
        premium_rate=Decimal("5"),
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
    )

    payload = draft.to_payload()

    assert "id" not in payload
    assert payload["premiumAmount"] == 1250.0
    assert payload["startDate"] == "2024-01-01"
    assert payload["endDate"] == "2024-12-31"


def test_new_draft_covers_one_year() -> None:
    draft = Policy.new_draft(today=date(2024, 2, 29))

    assert draft.is_draft
    assert draft.start_date == date(2024, 2, 29)
    assert draft.end_date == date(2025, 2, 28)


def test_from_payload_stringifies_non_text_fields() -> None:
    policy = Policy.from_payload({"id": 5, "beneficiaryName": 123, "carBrand": None, "carType": 86})

    assert policy.beneficiary_name == "123"
    assert policy.car_brand == ""
    assert policy.car_type == "86"
