from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal, InvalidOperation
from typing import Optional

ZERO = Decimal(0)

# Scale of the DECIMAL(14,4) money columns in database/schema.sql.
MONEY_QUANTUM = Decimal("0.0001")


def to_decimal(value: object) -> Decimal:
    """Coerce a store value into Decimal; ``None`` and blanks become 0."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        return Decimal(str(value))
    try:
        return Decimal(str(value).strip() or 0)
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {value!r}") from exc


def to_optional_decimal(value: object) -> Optional[Decimal]:
    if value is None:
        return None
    return to_decimal(value)


def floor_money(value: Decimal) -> Decimal:
    """Truncate toward negative infinity at the stored money scale.

    Shares of a fixed pool must not round up, or their sum can exceed it.
    """
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_FLOOR)
