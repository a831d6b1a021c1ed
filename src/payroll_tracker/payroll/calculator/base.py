from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ...attendance.model import AttendanceRecord
from ...employees.model import Employee
from ..model import WageBreakdown


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute_breakdown(
        self,
        employee: Optional[Employee],
        records: Iterable[AttendanceRecord],
    ) -> WageBreakdown:
        raise NotImplementedError
