from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from ...attendance.model import AttendanceRecord
from ...common.money import quantize_money, to_decimal
from ...core.enums import AttendanceStatus
from ...core.exceptions import ValidationError
from ...employees.model import Employee
from ..model import WageBreakdown
from .base import WageCalculator


class StandardWageCalculator(WageCalculator):
    """Standard rule: day rates by status, overtime and advances on every record.

    Each monetary component is rounded to cents before summing, so the stored
    components always add up exactly to the stored gross and net amounts.
    """

    def compute_breakdown(
        self,
        employee: Optional[Employee],
        records: Iterable[AttendanceRecord],
    ) -> WageBreakdown:
        if employee is None:
            raise ValidationError("Employee not found")

        counts = {status: 0 for status in AttendanceStatus}
        total_overtime_hours = Decimal("0")
        total_advances = Decimal("0")

        for record in records:
            try:
                status = AttendanceStatus(record.status)
            except ValueError:
                raise ValidationError(f"Unknown attendance status {record.status!r} on {record.work_date}")
            counts[status] += 1
            # Overtime and advances count regardless of the day's status.
            total_overtime_hours += to_decimal(record.overtime_hours, "Overtime hours")
            total_advances += to_decimal(record.advance_taken, "Advance taken")

        present_days = counts[AttendanceStatus.PRESENT]
        half_days = counts[AttendanceStatus.HALF_DAY]

        base_wage = quantize_money(present_days * to_decimal(employee.daily_wage))
        half_day_amount = quantize_money(half_days * to_decimal(employee.half_day_rate))
        overtime_amount = quantize_money(total_overtime_hours * to_decimal(employee.overtime_rate))
        total_advances = quantize_money(total_advances)
        gross_amount = base_wage + half_day_amount + overtime_amount

        return WageBreakdown(
            present_days=present_days,
            half_days=half_days,
            absent_days=counts[AttendanceStatus.ABSENT],
            total_overtime_hours=total_overtime_hours,
            base_wage=base_wage,
            overtime_amount=overtime_amount,
            half_day_amount=half_day_amount,
            total_advances=total_advances,
            gross_amount=gross_amount,
            net_amount=gross_amount - total_advances,
        )
