from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import PeriodType


@dataclass(frozen=True)
class WageBreakdown:
    """Pay components derived from one employee's attendance over a period.

    gross_amount = base_wage + half_day_amount + overtime_amount
    net_amount = gross_amount - total_advances (may be negative)
    """

    present_days: int
    half_days: int
    absent_days: int
    total_overtime_hours: Decimal
    base_wage: Decimal
    overtime_amount: Decimal
    half_day_amount: Decimal
    total_advances: Decimal
    gross_amount: Decimal
    net_amount: Decimal

    @property
    def total_days(self) -> int:
        return self.present_days + self.half_days + self.absent_days


@dataclass(frozen=True)
class WageCalculation:
    """Domain entity: a stored wage calculation for one employee and period."""

    calculation_id: int
    employee_id: int
    period_start: date
    period_end: date
    period_type: PeriodType
    breakdown: WageBreakdown
    is_paid: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def net_amount(self) -> Decimal:
        return self.breakdown.net_amount


@dataclass(frozen=True)
class CalculationResult:
    calculation: WageCalculation
    breakdown: WageBreakdown
