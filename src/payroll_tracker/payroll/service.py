from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import default_period
from ..common.validators import require_date_range
from ..core.constants import DEFAULT_CALCULATION_LIMIT
from ..core.enums import PeriodType
from ..core.exceptions import NotFoundError, PersistenceError, ValidationError
from ..employees.repository import EmployeeRepository
from .calculator.base import WageCalculator
from .calculator.standard_calculator import StandardWageCalculator
from .model import CalculationResult, WageCalculation
from .repository import WageCalculationRepository

logger = logging.getLogger(__name__)


def parse_period_type(value: Any) -> PeriodType:
    try:
        return PeriodType(value)
    except ValueError:
        raise ValidationError(f"Unknown period type: {value!r}")


class WageService:
    """Use case: turn attendance over a period into a stored wage calculation."""

    def __init__(
        self,
        calculations: WageCalculationRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[WageCalculator] = None,
    ):
        self._calculations = calculations
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardWageCalculator()

    def calculate_and_store(
        self,
        *,
        employee_id: Optional[int],
        period_start: Optional[date],
        period_end: Optional[date],
        period_type: Any = PeriodType.WEEKLY,
    ) -> CalculationResult:
        """Compute the breakdown for [period_start, period_end] and insert it.

        Every call inserts a new unpaid row, even when a calculation for the
        same or an overlapping period already exists.
        """

        if not employee_id:
            raise ValidationError("Please select an employee and date range")
        start, end = require_date_range(period_start, period_end)
        ptype = parse_period_type(period_type)

        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise ValidationError("Employee not found")

        records = self._attendance.list_for_range(employee_id=employee.employee_id, start_date=start, end_date=end)
        breakdown = self._calculator.compute_breakdown(employee, records)

        calculation_id = self._calculations.create(
            employee_id=employee.employee_id,
            period_start=start,
            period_end=end,
            period_type=ptype,
            breakdown=breakdown,
        )
        calculation = self._calculations.get_by_id(calculation_id)
        if calculation is None:
            raise PersistenceError("Wage calculation was not saved")

        logger.info(
            "Stored wage calculation %s for employee %s (%s..%s): gross=%s net=%s",
            calculation_id,
            employee.employee_id,
            start,
            end,
            breakdown.gross_amount,
            breakdown.net_amount,
        )
        return CalculationResult(calculation=calculation, breakdown=breakdown)

    def get_calculation(self, calculation_id: int) -> WageCalculation:
        calculation = self._calculations.get_by_id(int(calculation_id))
        if not calculation:
            raise NotFoundError(f"Wage calculation {calculation_id} not found")
        return calculation

    def list_calculations(
        self,
        *,
        employee_id: Optional[int] = None,
        limit: int = DEFAULT_CALCULATION_LIMIT,
    ) -> Sequence[WageCalculation]:
        return self._calculations.list_recent(employee_id=employee_id, limit=int(limit))

    @staticmethod
    def default_period(period_type: Any, today: date) -> tuple[date, date]:
        return default_period(parse_period_type(period_type), today)
