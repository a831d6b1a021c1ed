from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import today_local
from ..common.validators import optional_text
from ..core.enums import PaymentMethod
from ..core.exceptions import AlreadyPaidError, NotFoundError, PersistenceError, ValidationError
from ..payroll.model import WageCalculation
from ..payroll.repository import WageCalculationRepository
from .model import PaymentRecordResult
from .repository import PaymentRepository

logger = logging.getLogger(__name__)


def parse_payment_method(value: Any) -> Optional[PaymentMethod]:
    if value is None or value == "":
        return None
    try:
        return PaymentMethod(value)
    except ValueError:
        raise ValidationError(f"Unknown payment method: {value!r}")


def period_note(calculation: WageCalculation) -> str:
    return (
        f"Payment for {calculation.period_type.value} period: "
        f"{calculation.period_start.isoformat()} to {calculation.period_end.isoformat()}"
    )


class PaymentService:
    """Use case: mark a wage calculation paid and record its payment."""

    def __init__(self, payments: PaymentRepository, calculations: WageCalculationRepository):
        self._payments = payments
        self._calculations = calculations

    def mark_paid(
        self,
        calculation_id: int,
        *,
        payment_date: Optional[date] = None,
        payment_method: Any = PaymentMethod.CASH,
        notes: Optional[str] = None,
    ) -> PaymentRecordResult:
        """Flip ``is_paid`` and create the payment, both or neither.

        A second call for the same calculation raises AlreadyPaidError and
        never creates a second payment.
        """

        calculation = self._calculations.get_by_id(int(calculation_id))
        if not calculation:
            raise NotFoundError(f"Wage calculation {calculation_id} not found")
        if calculation.is_paid:
            raise AlreadyPaidError(f"Wage calculation {calculation_id} is already paid")

        method = parse_payment_method(payment_method)
        try:
            payment_id = self._payments.record_payment(
                calculation_id=calculation.calculation_id,
                payment_date=payment_date or today_local(),
                payment_method=method,
                notes=optional_text(notes, "Notes") or period_note(calculation),
            )
        except AlreadyPaidError:
            logger.warning("Rejected second payment for wage calculation %s", calculation.calculation_id)
            raise

        payment = self._payments.get_by_id(payment_id)
        updated = self._calculations.get_by_id(calculation.calculation_id)
        if payment is None or updated is None:
            raise PersistenceError("Payment was not saved")

        logger.info(
            "Wage calculation %s paid: payment %s amount=%s method=%s",
            calculation.calculation_id,
            payment.payment_id,
            payment.amount,
            method.value if method else "-",
        )
        return PaymentRecordResult(calculation=updated, payment=payment)
