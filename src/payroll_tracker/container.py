from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payments.mysql_payment_repository import MySQLPaymentRepository
from .payments.repository import PaymentRepository
from .payments.service import PaymentService
from .payroll.mysql_wage_repository import MySQLWageCalculationRepository
from .payroll.repository import WageCalculationRepository
from .payroll.service import WageService
from .reports.service import PaymentReportService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    calculations_repo: WageCalculationRepository
    payments_repo: PaymentRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    wage_service: WageService
    payment_service: PaymentService
    payment_report_service: PaymentReportService


def wire_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    calculations_repo: WageCalculationRepository,
    payments_repo: PaymentRepository,
) -> Container:
    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        calculations_repo=calculations_repo,
        payments_repo=payments_repo,
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        wage_service=WageService(calculations_repo, employees_repo, attendance_repo),
        payment_service=PaymentService(payments_repo, calculations_repo),
        payment_report_service=PaymentReportService(payments_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        calculations_repo=MySQLWageCalculationRepository(conn),
        payments_repo=MySQLPaymentRepository(conn),
    )
