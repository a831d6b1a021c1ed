from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import PaymentMethod
from .model import Payment, PaymentReportRow


class PaymentRepository(Protocol):
    def record_payment(
        self,
        *,
        calculation_id: int,
        payment_date: date,
        payment_method: Optional[PaymentMethod],
        notes: Optional[str],
    ) -> int:
        """Flip the calculation to paid and insert its payment in one transaction.

        The flip is a compare-and-set on ``is_paid``; when another caller got
        there first nothing is written and AlreadyPaidError is raised. The
        payment amount is copied from the calculation's net amount.
        """

        raise NotImplementedError

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        raise NotImplementedError

    def list_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[PaymentReportRow]:
        raise NotImplementedError
