from __future__ import annotations

import dataclasses
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import pytest

from payroll_tracker.attendance.model import AttendanceRecord
from payroll_tracker.container import wire_services
from payroll_tracker.core.enums import AttendanceStatus, PaymentMethod, PeriodType
from payroll_tracker.core.exceptions import AlreadyPaidError, ConflictError, NotFoundError
from payroll_tracker.employees.model import Employee, EmployeeInput
from payroll_tracker.payments.model import Payment, PaymentReportRow
from payroll_tracker.payroll.model import WageBreakdown, WageCalculation


class InMemoryEmployees:
    def __init__(self):
        self.rows: dict[int, Employee] = {}
        self.history: set[int] = set()
        self._id = 0

    def add(self, **kwargs) -> Employee:
        self._id += 1
        fields = {
            "name": "Employee",
            "email": f"e{self._id}@example.com",
            "phone": None,
            "position": None,
            "daily_wage": Decimal("100"),
            "overtime_rate": Decimal("20"),
            "half_day_rate": Decimal("50"),
        }
        fields.update(kwargs)
        emp = Employee(employee_id=self._id, **fields)
        self.rows[self._id] = emp
        return emp

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.rows.get(employee_id)

    def get_by_email(self, email: str) -> Optional[Employee]:
        return next((e for e in self.rows.values() if e.email == email), None)

    def list_all(self, *, active_only: bool = False):
        items = [e for e in self.rows.values() if e.is_active or not active_only]
        return sorted(items, key=lambda e: (e.name, e.employee_id))

    def create(self, data: EmployeeInput) -> int:
        if self.get_by_email(data.email):
            raise ConflictError("Duplicate entry for key 'uq_employees_email'")
        return self.add(**dataclasses.asdict(data)).employee_id

    def update(self, employee_id: int, data: EmployeeInput) -> bool:
        if employee_id not in self.rows:
            return False
        self.rows[employee_id] = dataclasses.replace(self.rows[employee_id], **dataclasses.asdict(data))
        return True

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        if employee_id not in self.rows:
            return False
        self.rows[employee_id] = dataclasses.replace(self.rows[employee_id], is_active=is_active)
        return True

    def has_history(self, employee_id: int) -> bool:
        return employee_id in self.history

    def delete_by_id(self, employee_id: int) -> bool:
        return self.rows.pop(employee_id, None) is not None


class InMemoryAttendance:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self._by_key: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((employee_id, work_date))

    def get_recent_for_employee(self, employee_id: int, limit: int):
        items = [r for r in self._by_key.values() if r.employee_id == employee_id]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items[:limit]

    def list_for_range(self, *, employee_id: int, start_date: date, end_date: date):
        return [
            r
            for r in self._by_key.values()
            if r.employee_id == employee_id and start_date <= r.work_date <= end_date
        ]

    def upsert(self, *, employee_id, work_date, status, overtime_hours, advance_taken, notes=None) -> int:
        existing = self._by_key.get((employee_id, work_date))
        if existing:
            attendance_id = existing.attendance_id
        else:
            self._id += 1
            attendance_id = self._id
        self._by_key[(employee_id, work_date)] = AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            overtime_hours=Decimal(overtime_hours),
            advance_taken=Decimal(advance_taken),
            notes=notes,
        )
        self._employees.history.add(employee_id)
        return attendance_id

    def count(self) -> int:
        return len(self._by_key)


class InMemoryCalculations:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.rows: dict[int, WageCalculation] = {}
        self._id = 0

    def create(self, *, employee_id, period_start, period_end, period_type, breakdown) -> int:
        self._id += 1
        self.rows[self._id] = WageCalculation(
            calculation_id=self._id,
            employee_id=employee_id,
            period_start=period_start,
            period_end=period_end,
            period_type=period_type,
            breakdown=breakdown,
            is_paid=False,
            created_at=datetime(2025, 1, 1, 12, 0),
        )
        self._employees.history.add(employee_id)
        return self._id

    def get_by_id(self, calculation_id: int) -> Optional[WageCalculation]:
        return self.rows.get(calculation_id)

    def list_recent(self, *, employee_id=None, limit=20):
        items = [c for c in self.rows.values() if employee_id is None or c.employee_id == employee_id]
        items.sort(key=lambda c: c.calculation_id, reverse=True)
        return items[:limit]


class InMemoryPayments:
    """Mirrors the MySQL repository: compare-and-set on is_paid, then insert."""

    def __init__(self, employees: InMemoryEmployees, calculations: InMemoryCalculations):
        self._employees = employees
        self._calculations = calculations
        self.rows: dict[int, Payment] = {}
        self._id = 0
        self.fail_on_insert: Optional[Exception] = None

    def record_payment(self, *, calculation_id, payment_date, payment_method, notes) -> int:
        calc = self._calculations.rows.get(calculation_id)
        if calc is None:
            raise NotFoundError("missing")
        if calc.is_paid:
            raise AlreadyPaidError("already paid")
        if self.fail_on_insert is not None:
            # Insert fails: the flag flip is rolled back with it.
            raise self.fail_on_insert

        self._calculations.rows[calculation_id] = dataclasses.replace(calc, is_paid=True)
        self._id += 1
        self.rows[self._id] = Payment(
            payment_id=self._id,
            wage_calculation_id=calculation_id,
            employee_id=calc.employee_id,
            amount=calc.net_amount,
            payment_date=payment_date,
            payment_method=payment_method,
            notes=notes,
        )
        return self._id

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        return self.rows.get(payment_id)

    def list_report_rows(self, *, start_date, end_date, employee_id=None):
        rows = [
            PaymentReportRow(
                payment=p,
                employee=self._employees.rows[p.employee_id],
                calculation=self._calculations.rows[p.wage_calculation_id],
            )
            for p in self.rows.values()
            if start_date <= p.payment_date <= end_date and (employee_id is None or p.employee_id == employee_id)
        ]
        rows.sort(key=lambda r: (r.payment.payment_date, r.payment.payment_id), reverse=True)
        return rows


class InMemoryStore:
    def __init__(self):
        self.employees = InMemoryEmployees()
        self.attendance = InMemoryAttendance(self.employees)
        self.calculations = InMemoryCalculations(self.employees)
        self.payments = InMemoryPayments(self.employees, self.calculations)

    def container(self):
        return wire_services(
            employees_repo=self.employees,
            attendance_repo=self.attendance,
            calculations_repo=self.calculations,
            payments_repo=self.payments,
        )

    def add_calculation(self, employee: Employee, *, net: str, start=date(2025, 1, 1), end=date(2025, 1, 7)) -> int:
        amount = Decimal(net)
        breakdown = WageBreakdown(
            present_days=0,
            half_days=0,
            absent_days=0,
            total_overtime_hours=Decimal("0"),
            base_wage=amount,
            overtime_amount=Decimal("0"),
            half_day_amount=Decimal("0"),
            total_advances=Decimal("0"),
            gross_amount=amount,
            net_amount=amount,
        )
        return self.calculations.create(
            employee_id=employee.employee_id,
            period_start=start,
            period_end=end,
            period_type=PeriodType.WEEKLY,
            breakdown=breakdown,
        )

    def add_payment(self, employee: Employee, *, net: str, paid_on: date, method=PaymentMethod.CASH) -> int:
        calc_id = self.add_calculation(employee, net=net)
        return self.payments.record_payment(
            calculation_id=calc_id,
            payment_date=paid_on,
            payment_method=method,
            notes=None,
        )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def scenario_week(store: InMemoryStore):
    """100/20/50 employee with 3 present, 1 half-day, 1 absent over Jan 6-10 2025."""

    emp = store.employees.add(name="Asha", email="asha@example.com")
    days = [
        (date(2025, 1, 6), AttendanceStatus.PRESENT, "2", "0"),
        (date(2025, 1, 7), AttendanceStatus.PRESENT, "0", "30"),
        (date(2025, 1, 8), AttendanceStatus.PRESENT, "0", "0"),
        (date(2025, 1, 9), AttendanceStatus.HALF_DAY, "0", "0"),
        (date(2025, 1, 10), AttendanceStatus.ABSENT, "0", "0"),
    ]
    for work_date, status, ot, adv in days:
        store.attendance.upsert(
            employee_id=emp.employee_id,
            work_date=work_date,
            status=status,
            overtime_hours=Decimal(ot),
            advance_taken=Decimal(adv),
        )
    return emp


class RecordingCursor:
    """DB-API cursor stand-in: records statements, returns preset rows."""

    def __init__(self, *, row=None, rows=(), lastrowid=None):
        self.executed: list[tuple[str, tuple]] = []
        self.row = row
        self.rows = list(rows)
        self.lastrowid = lastrowid
        self.rowcount = 0
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), tuple(params)))

    def fetchone(self):
        return self.row

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    """Stands in for DatabaseConnection; always hands out the same connection."""

    def __init__(self, cursor):
        self.cursor = cursor
        self.conn = FakeConnection(cursor)

    def connect(self):
        return self.conn


@pytest.fixture
def connect_with():
    return FakeConnectionFactory


@pytest.fixture
def recording_db():
    return FakeConnectionFactory(RecordingCursor())
