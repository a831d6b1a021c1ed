from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import optional_text, require_non_empty, require_non_negative
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import Employee, EmployeeInput
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases: register, edit, deactivate and remove employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    @staticmethod
    def _validate(
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        position: Optional[str] = None,
        daily_wage: Any = 0,
        overtime_rate: Any = 0,
        half_day_rate: Any = 0,
    ) -> EmployeeInput:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email").lower()
        if "@" not in email:
            raise ValidationError("Email is not valid")

        return EmployeeInput(
            name=name,
            email=email,
            phone=optional_text(phone, "Phone"),
            position=optional_text(position, "Position"),
            daily_wage=require_non_negative(daily_wage, "Daily wage"),
            overtime_rate=require_non_negative(overtime_rate, "Overtime rate"),
            half_day_rate=require_non_negative(half_day_rate, "Half-day rate"),
        )

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def list_employees(self, *, active_only: bool = False) -> Sequence[Employee]:
        return self._employees.list_all(active_only=active_only)

    def register(self, **fields: Any) -> Employee:
        data = self._validate(**fields)
        if self._employees.get_by_email(data.email):
            raise ConflictError("An employee with this email already exists")

        employee_id = self._employees.create(data)
        logger.info("Registered employee %s (%s)", employee_id, data.email)
        return self.get(employee_id)

    def update(self, employee_id: int, **fields: Any) -> Employee:
        """Replace profile and rates. New rates only affect future calculations."""

        current = self.get(employee_id)
        data = self._validate(**fields)

        other = self._employees.get_by_email(data.email)
        if other and other.employee_id != current.employee_id:
            raise ConflictError("An employee with this email already exists")

        self._employees.update(current.employee_id, data)
        logger.info("Updated employee %s", current.employee_id)
        return self.get(current.employee_id)

    def deactivate(self, employee_id: int) -> Employee:
        current = self.get(employee_id)
        self._employees.set_active(current.employee_id, is_active=False)
        logger.info("Deactivated employee %s", current.employee_id)
        return self.get(current.employee_id)

    def activate(self, employee_id: int) -> Employee:
        current = self.get(employee_id)
        self._employees.set_active(current.employee_id, is_active=True)
        logger.info("Reactivated employee %s", current.employee_id)
        return self.get(current.employee_id)

    def remove(self, employee_id: int) -> bool:
        """Delete an employee without history; otherwise only deactivate.

        Returns True when the row was deleted, False when it was kept inactive.
        """

        current = self.get(employee_id)
        if self._employees.has_history(current.employee_id):
            self._employees.set_active(current.employee_id, is_active=False)
            logger.info("Employee %s has history, deactivated instead of deleted", current.employee_id)
            return False

        self._employees.delete_by_id(current.employee_id)
        logger.info("Deleted employee %s", current.employee_id)
        return True
