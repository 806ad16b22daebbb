"""Display rounding shared by the provider, aggregation and formatters."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

ONE_DECIMAL = Decimal("0.1")


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, sending exact ties away from zero.

    ``round()`` sends ties to even (12.25 -> 12.2); report values use
    half-up on the exact binary value instead (12.25 -> 12.3).
    """
    return float(Decimal(float(value)).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))
