from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from payroll_tracker.attendance.model import AttendanceRecord
from payroll_tracker.core.enums import AttendanceStatus
from payroll_tracker.core.exceptions import ValidationError
from payroll_tracker.employees.model import Employee
from payroll_tracker.payroll.calculator.standard_calculator import StandardWageCalculator

EMPLOYEE = Employee(
    employee_id=1,
    name="A",
    email="a@example.com",
    phone=None,
    position=None,
    daily_wage=Decimal("100.00"),
    overtime_rate=Decimal("20.00"),
    half_day_rate=Decimal("50.00"),
)


def _rec(day: int, status, overtime="0", advance="0") -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=day,
        employee_id=1,
        work_date=date(2025, 1, 1) + timedelta(days=day),
        status=status,
        overtime_hours=Decimal(overtime),
        advance_taken=Decimal(advance),
    )


def test_scenario_week_breakdown():
    records = [
        _rec(0, AttendanceStatus.PRESENT, overtime="2"),
        _rec(1, AttendanceStatus.PRESENT, advance="30"),
        _rec(2, AttendanceStatus.PRESENT),
        _rec(3, AttendanceStatus.HALF_DAY),
        _rec(4, AttendanceStatus.ABSENT),
    ]

    b = StandardWageCalculator().compute_breakdown(EMPLOYEE, records)

    assert (b.present_days, b.half_days, b.absent_days) == (3, 1, 1)
    assert b.total_overtime_hours == Decimal("2")
    assert b.base_wage == Decimal("300")
    assert b.half_day_amount == Decimal("50")
    assert b.overtime_amount == Decimal("40")
    assert b.gross_amount == Decimal("390")
    assert b.total_advances == Decimal("30")
    assert b.net_amount == Decimal("360")


def test_empty_attendance_gives_zero_breakdown():
    b = StandardWageCalculator().compute_breakdown(EMPLOYEE, [])

    assert (b.present_days, b.half_days, b.absent_days) == (0, 0, 0)
    assert b.total_overtime_hours == 0
    for amount in (b.base_wage, b.overtime_amount, b.half_day_amount, b.total_advances, b.gross_amount, b.net_amount):
        assert amount == 0


def test_overtime_and_advances_count_on_absent_days():
    b = StandardWageCalculator().compute_breakdown(
        EMPLOYEE, [_rec(0, AttendanceStatus.ABSENT, overtime="1.5", advance="10")]
    )

    assert b.absent_days == 1
    assert b.base_wage == 0
    assert b.overtime_amount == Decimal("30.00")
    assert b.net_amount == Decimal("20.00")


def test_net_amount_can_go_negative():
    b = StandardWageCalculator().compute_breakdown(
        EMPLOYEE, [_rec(0, AttendanceStatus.HALF_DAY, advance="80")]
    )

    assert b.gross_amount == Decimal("50")
    assert b.net_amount == Decimal("-30")


def test_repeated_fractional_sums_stay_exact():
    records = [_rec(i, AttendanceStatus.PRESENT, overtime="0.1", advance="0.1") for i in range(10)]

    b = StandardWageCalculator().compute_breakdown(EMPLOYEE, records)

    assert b.total_overtime_hours == Decimal("1.0")
    assert b.overtime_amount == Decimal("20.00")
    assert b.total_advances == Decimal("1.00")
    assert b.net_amount == Decimal("1019.00")


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError):
        StandardWageCalculator().compute_breakdown(EMPLOYEE, [_rec(0, "late")])


def test_missing_employee_is_rejected():
    with pytest.raises(ValidationError):
        StandardWageCalculator().compute_breakdown(None, [])


@pytest.mark.parametrize(
    "statuses",
    [
        ["present"] * 7,
        ["absent", "half-day", "present", "half-day"],
        ["half-day"] * 3 + ["absent"] * 2,
    ],
)
def test_counts_and_totals_are_consistent(statuses):
    records = [_rec(i, AttendanceStatus(s), overtime="0.75", advance="12.5") for i, s in enumerate(statuses)]

    b = StandardWageCalculator().compute_breakdown(EMPLOYEE, records)

    assert b.total_days == len(records)
    assert b.gross_amount == b.base_wage + b.half_day_amount + b.overtime_amount
    assert b.net_amount == b.gross_amount - b.total_advances
