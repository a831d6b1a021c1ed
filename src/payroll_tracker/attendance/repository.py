from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_range(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records whose date falls in [start_date, end_date], both inclusive."""

        raise NotImplementedError

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
        """Insert or update the record keyed by (employee_id, work_date); returns its id."""

        raise NotImplementedError
