from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.validators import require_date_range
from ..payments.repository import PaymentRepository
from .model import EmployeePaymentSummary, PaymentReport


class PaymentReportService:
    def __init__(self, payments: PaymentRepository):
        self._payments = payments

    def list_payments(
        self,
        *,
        start: Optional[date],
        end: Optional[date],
        employee_id: Optional[int] = None,
    ) -> PaymentReport:
        """Payments dated within [start, end], newest first."""

        start, end = require_date_range(start, end)
        rows = self._payments.list_report_rows(start_date=start, end_date=end, employee_id=employee_id)
        return PaymentReport(start=start, end=end, rows=list(rows))

    def summarize_by_employee(self, *, start: Optional[date], end: Optional[date]) -> Sequence[EmployeePaymentSummary]:
        """Per-employee totals for the range; employees without payments are left out."""

        report = self.list_payments(start=start, end=end)

        summary_map: dict[int, dict] = {}
        for row in report.rows:
            s = summary_map.get(row.employee.employee_id)
            if not s:
                s = {
                    "employee": row.employee,
                    "total": Decimal("0"),
                    "count": 0,
                    "last_date": row.payment.payment_date,
                }
                summary_map[row.employee.employee_id] = s
            s["total"] += row.payment.amount
            s["count"] += 1
            if row.payment.payment_date > s["last_date"]:
                s["last_date"] = row.payment.payment_date

        summary = [
            EmployeePaymentSummary(
                employee=s["employee"],
                total_payments=s["total"],
                payment_count=s["count"],
                last_payment_date=s["last_date"],
            )
            for s in summary_map.values()
        ]
        summary.sort(key=lambda x: (x.employee.name.lower(), x.employee.employee_id))
        return summary
