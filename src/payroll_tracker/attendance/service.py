from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.validators import optional_text, require_non_negative
from ..core.constants import DEFAULT_HISTORY_LIMIT, MAX_OVERTIME_HOURS
from ..core.enums import AttendanceStatus
from ..core.exceptions import PersistenceError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    @staticmethod
    def parse_status(value: Any) -> AttendanceStatus:
        try:
            return AttendanceStatus(value)
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {value!r}")

    def mark_attendance(
        self,
        *,
        employee_id: Optional[int],
        work_date: Optional[date],
        status: Any,
        overtime_hours: Any = 0,
        advance_taken: Any = 0,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        """Create or overwrite the attendance of one employee for one date."""

        if not employee_id or work_date is None:
            raise ValidationError("Please select an employee and date")

        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise ValidationError("Employee does not exist")
        if not employee.is_active:
            raise ValidationError("Employee is inactive")

        self._attendance.upsert(
            employee_id=employee.employee_id,
            work_date=work_date,
            status=self.parse_status(status),
            overtime_hours=require_non_negative(overtime_hours, "Overtime hours", max_value=MAX_OVERTIME_HOURS),
            advance_taken=require_non_negative(advance_taken, "Advance taken"),
            notes=optional_text(notes, "Notes"),
        )

        record = self._attendance.get_for_employee_and_date(employee.employee_id, work_date)
        if record is None:
            raise PersistenceError("Attendance was not saved")
        logger.info("Marked %s for employee %s on %s", record.status.value, employee.employee_id, work_date)
        return record

    def get_history(self, employee_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        return self._attendance.get_recent_for_employee(int(employee_id), int(limit))
