"""Display helpers for the policy table."""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from policy_desk.core.premium import to_decimal


def format_currency(amount: Decimal | float | int | str | None) -> str:
    """Format an amount as Indonesian Rupiah without decimals, e.g. Rp 25.000."""
    value = to_decimal(amount)
    try:
        value = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # more digits than the context precision; format rounds instead
        pass
    sign = "-" if value < 0 else ""
    grouped = f"{value.copy_abs():,.0f}".replace(",", ".")
    return f"{sign}Rp {grouped}"


def format_date(value: date | str | None) -> str:
    """Render only the date portion of a date or ISO timestamp."""
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()[:10]
    return str(value).split("T")[0]
