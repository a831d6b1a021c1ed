from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeInput


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self, *, active_only: bool = False) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, data: EmployeeInput) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, data: EmployeeInput) -> bool:
        raise NotImplementedError

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError

    def has_history(self, employee_id: int) -> bool:
        """True when attendance, calculations or payments reference the employee."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
