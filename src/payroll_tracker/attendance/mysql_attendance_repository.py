from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    id, employee_id, date, status, overtime_hours, advance_taken, notes, created_at, updated_at
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["date"],
        status=AttendanceStatus(r["status"]),
        overtime_hours=r.get("overtime_hours") or Decimal("0"),
        advance_taken=r.get("advance_taken") or Decimal("0"),
        notes=r.get("notes"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_id=%s AND date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE employee_id=%s
                ORDER BY date DESC
                LIMIT %s
                """,
                (int(employee_id), int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_range(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE employee_id=%s AND date BETWEEN %s AND %s
                ORDER BY date ASC
                """,
                (int(employee_id), start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def upsert(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        overtime_hours: Decimal,
        advance_taken: Decimal,
        notes: Optional[str] = None,
    ) -> int:
        # The unique (employee_id, date) key turns a concurrent second insert into an update.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, date, status, overtime_hours, advance_taken, notes)
                VALUES(%s,%s,%s,%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE
                    id=LAST_INSERT_ID(attendance.id),
                    status=new.status,
                    overtime_hours=new.overtime_hours,
                    advance_taken=new.advance_taken,
                    notes=new.notes,
                    updated_at=NOW()
                """,
                (int(employee_id), work_date, status.value, overtime_hours, advance_taken, notes),
            )
            return int(cur.lastrowid)
