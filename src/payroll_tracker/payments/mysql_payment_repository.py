from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import PaymentMethod
from ..core.exceptions import AlreadyPaidError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..employees.mysql_employee_repository import row_to_employee
from ..payroll.mysql_wage_repository import row_to_calculation, select_list
from .model import Payment, PaymentReportRow
from .repository import PaymentRepository

_PAYMENT_COLUMNS = (
    "id",
    "wage_calculation_id",
    "employee_id",
    "amount",
    "payment_date",
    "payment_method",
    "notes",
    "created_at",
)

_EMPLOYEE_COLUMNS = (
    "id",
    "name",
    "email",
    "phone",
    "position",
    "daily_wage",
    "overtime_rate",
    "half_day_rate",
    "is_active",
    "created_at",
    "updated_at",
)


def _to_payment(r: dict, prefix: str = "") -> Payment:
    method = r.get(f"{prefix}payment_method")
    return Payment(
        payment_id=int(r[f"{prefix}id"]),
        wage_calculation_id=int(r[f"{prefix}wage_calculation_id"]),
        employee_id=int(r[f"{prefix}employee_id"]),
        amount=r[f"{prefix}amount"],
        payment_date=r[f"{prefix}payment_date"],
        payment_method=PaymentMethod(method) if method else None,
        notes=r.get(f"{prefix}notes"),
        created_at=r.get(f"{prefix}created_at"),
    )


class MySQLPaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def record_payment(
        self,
        *,
        calculation_id: int,
        payment_date: date,
        payment_method: Optional[PaymentMethod],
        notes: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE wage_calculations
                SET is_paid=1, updated_at=NOW()
                WHERE id=%s AND is_paid=0
                """,
                (int(calculation_id),),
            )
            if cur.rowcount == 0:
                cur.execute("SELECT id FROM wage_calculations WHERE id=%s", (int(calculation_id),))
                if not fetchone(cur):
                    raise NotFoundError(f"Wage calculation {calculation_id} not found")
                raise AlreadyPaidError(f"Wage calculation {calculation_id} is already paid")

            cur.execute(
                """
                INSERT INTO payments(wage_calculation_id, employee_id, amount, payment_date, payment_method, notes)
                SELECT id, employee_id, net_amount, %s, %s, %s
                FROM wage_calculations
                WHERE id=%s
                """,
                (
                    payment_date,
                    payment_method.value if payment_method else None,
                    notes,
                    int(calculation_id),
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {', '.join(_PAYMENT_COLUMNS)} FROM payments WHERE id=%s",
                (int(payment_id),),
            )
            r = fetchone(cur)
            return _to_payment(r) if r else None

    def list_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[PaymentReportRow]:
        clauses = ["p.payment_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]

        if employee_id is not None:
            clauses.append("p.employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)
        payment_cols = ", ".join(f"p.{c} AS p_{c}" for c in _PAYMENT_COLUMNS)
        employee_cols = ", ".join(f"e.{c} AS e_{c}" for c in _EMPLOYEE_COLUMNS)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {payment_cols}, {employee_cols}, {select_list('wc', 'wc_')}
                FROM payments p
                JOIN employees e ON e.id = p.employee_id
                JOIN wage_calculations wc ON wc.id = p.wage_calculation_id
                WHERE {where}
                ORDER BY p.payment_date DESC, p.id DESC
                """,
                tuple(params),
            )
            return [
                PaymentReportRow(
                    payment=_to_payment(r, "p_"),
                    employee=row_to_employee(r, "e_"),
                    calculation=row_to_calculation(r, "wc_"),
                )
                for r in fetchall(cur)
            ]
