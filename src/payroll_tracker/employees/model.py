from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee and the rates used for wage calculations.

    Note: plain data object (no database access code).
    """

    employee_id: int
    name: str
    email: str
    phone: Optional[str]
    position: Optional[str]
    daily_wage: Decimal
    overtime_rate: Decimal
    half_day_rate: Decimal
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class EmployeeInput:
    """Validated registration/update payload."""

    name: str
    email: str
    phone: Optional[str]
    position: Optional[str]
    daily_wage: Decimal
    overtime_rate: Decimal
    half_day_rate: Decimal
