from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..core.constants import CENT, MAX_MONEY
from ..core.exceptions import ValidationError
from .money import to_decimal


def require_non_empty(value: Any, field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Any, field_name: str = "Value") -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return (value or "").strip() or None


def require_non_negative(value: Any, field_name: str, *, max_value: Decimal = MAX_MONEY) -> Decimal:
    """Decimal in [0, max_value] with at most two decimal places."""
    amount = to_decimal(value, field_name)
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    if amount > max_value:
        raise ValidationError(f"{field_name} cannot exceed {max_value}")
    if amount != amount.quantize(CENT):
        raise ValidationError(f"{field_name} can have at most two decimal places")
    return amount


def require_date_range(start: Optional[date], end: Optional[date]) -> tuple[date, date]:
    if start is None or end is None:
        raise ValidationError("Please select a start and end date")
    if end < start:
        raise ValidationError("End date cannot be before start date")
    return start, end
