from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Sequence

from ..employees.model import Employee
from ..payments.model import PaymentReportRow


@dataclass(frozen=True)
class PaymentReport:
    start: date
    end: date
    rows: Sequence[PaymentReportRow]

    @property
    def total_amount(self) -> Decimal:
        return sum((row.payment.amount for row in self.rows), Decimal("0"))

    @property
    def payment_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class EmployeePaymentSummary:
    employee: Employee
    total_payments: Decimal
    payment_count: int
    last_payment_date: date
