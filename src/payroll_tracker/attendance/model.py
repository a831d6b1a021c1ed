from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar date."""

    attendance_id: int
    employee_id: int
    work_date: date
    status: AttendanceStatus
    overtime_hours: Decimal = Decimal("0")
    advance_taken: Decimal = Decimal("0")
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
