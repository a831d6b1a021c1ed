from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import PeriodType
from .model import WageBreakdown, WageCalculation


class WageCalculationRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        period_start: date,
        period_end: date,
        period_type: PeriodType,
        breakdown: WageBreakdown,
    ) -> int:
        """Always inserts a new unpaid calculation; overlapping periods are not merged."""

        raise NotImplementedError

    def get_by_id(self, calculation_id: int) -> Optional[WageCalculation]:
        raise NotImplementedError

    def list_recent(self, *, employee_id: Optional[int] = None, limit: int = 20) -> Sequence[WageCalculation]:
        raise NotImplementedError
