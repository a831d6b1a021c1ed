from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from ..core.constants import CENT, DEFAULT_CURRENCY_SYMBOL
from ..core.exceptions import ValidationError


def to_decimal(value: Any, field_name: str = "amount") -> Decimal:
    """Coerce driver/request values into Decimal without going through float."""
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} is not a valid number")


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    amount = quantize_money(value)
    if amount < 0:
        return f"-{symbol}{-amount:.2f}"
    return f"{symbol}{amount:.2f}"
