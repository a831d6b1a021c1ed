from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeeInput
from .repository import EmployeeRepository

_COLUMNS = """
    id, name, email, phone, position,
    daily_wage, overtime_rate, half_day_rate,
    is_active, created_at, updated_at
"""


def row_to_employee(r: dict, prefix: str = "") -> Employee:
    return Employee(
        employee_id=int(r[f"{prefix}id"]),
        name=r[f"{prefix}name"],
        email=r[f"{prefix}email"],
        phone=r.get(f"{prefix}phone"),
        position=r.get(f"{prefix}position"),
        daily_wage=r[f"{prefix}daily_wage"],
        overtime_rate=r[f"{prefix}overtime_rate"],
        half_day_rate=r[f"{prefix}half_day_rate"],
        is_active=bool(r.get(f"{prefix}is_active", True)),
        created_at=r.get(f"{prefix}created_at"),
        updated_at=r.get(f"{prefix}updated_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
            r = fetchone(cur)
            return row_to_employee(r) if r else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE email=%s", (email,))
            r = fetchone(cur)
            return row_to_employee(r) if r else None

    def list_all(self, *, active_only: bool = False) -> Sequence[Employee]:
        where = "WHERE is_active=1" if active_only else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees {where} ORDER BY name ASC, id ASC")
            return [row_to_employee(r) for r in fetchall(cur)]

    def create(self, data: EmployeeInput) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, email, phone, position, daily_wage, overtime_rate, half_day_rate, is_active)
                VALUES(%s,%s,%s,%s,%s,%s,%s,1)
                """,
                (
                    data.name,
                    data.email,
                    data.phone,
                    data.position,
                    data.daily_wage,
                    data.overtime_rate,
                    data.half_day_rate,
                ),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, data: EmployeeInput) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, email=%s, phone=%s, position=%s,
                    daily_wage=%s, overtime_rate=%s, half_day_rate=%s,
                    updated_at=NOW()
                WHERE id=%s
                """,
                (
                    data.name,
                    data.email,
                    data.phone,
                    data.position,
                    data.daily_wage,
                    data.overtime_rate,
                    data.half_day_rate,
                    int(employee_id),
                ),
            )
            return cur.rowcount > 0

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET is_active=%s, updated_at=NOW() WHERE id=%s",
                (1 if is_active else 0, int(employee_id)),
            )
            return cur.rowcount > 0

    def has_history(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    EXISTS(SELECT 1 FROM attendance WHERE employee_id=%s)
                    OR EXISTS(SELECT 1 FROM wage_calculations WHERE employee_id=%s)
                    OR EXISTS(SELECT 1 FROM payments WHERE employee_id=%s) AS has_history
                """,
                (int(employee_id), int(employee_id), int(employee_id)),
            )
            r = fetchone(cur)
            return bool(r and r["has_history"])

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0
