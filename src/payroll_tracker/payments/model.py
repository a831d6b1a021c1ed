from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import PaymentMethod
from ..employees.model import Employee
from ..payroll.model import WageCalculation


@dataclass(frozen=True)
class Payment:
    """Domain entity: money paid out for one wage calculation.

    ``amount`` is a snapshot of the calculation's net amount when it was marked paid.
    """

    payment_id: int
    wage_calculation_id: int
    employee_id: int
    amount: Decimal
    payment_date: date
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class PaymentRecordResult:
    calculation: WageCalculation
    payment: Payment


@dataclass(frozen=True)
class PaymentReportRow:
    """Read-model: a payment joined with its employee and calculation."""

    payment: Payment
    employee: Employee
    calculation: WageCalculation
