"""Premium amount calculation."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, Overflow
from typing import Any

HUNDRED = Decimal("100")


def to_decimal(value: Any) -> Decimal:
    """Parse a numeric input, treating missing or invalid values as zero."""
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        parsed = value
    else:
        try:
            parsed = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return Decimal("0")
    if not parsed.is_finite():
        return Decimal("0")
    return parsed


def calculate_premium(tsi: Any, rate: Any) -> Decimal:
    """Return tsi * rate / 100, where rate is a percentage.

    Never raises: inputs that do not parse, and products outside the decimal
    context's exponent range, give zero.
    """
    try:
        return to_decimal(tsi) * to_decimal(rate) / HUNDRED
    except (Overflow, InvalidOperation):
        return Decimal("0")
