from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from payroll_tracker.core.enums import PaymentMethod
from payroll_tracker.core.exceptions import AlreadyPaidError, ConflictError, NotFoundError, PersistenceError, ValidationError
from payroll_tracker.payments.service import PaymentService


@pytest.fixture
def calculated(store, scenario_week):
    container = store.container()
    result = container.wage_service.calculate_and_store(
        employee_id=scenario_week.employee_id,
        period_start=date(2025, 1, 6),
        period_end=date(2025, 1, 10),
        period_type="weekly",
    )
    return container, result.calculation


def test_mark_paid_creates_payment_with_net_amount(store, calculated):
    container, calc = calculated

    result = container.payment_service.mark_paid(calc.calculation_id, payment_date=date(2025, 1, 12))

    assert result.calculation.is_paid is True
    assert result.payment.amount == Decimal("360.00")
    assert result.payment.wage_calculation_id == calc.calculation_id
    assert result.payment.employee_id == calc.employee_id
    assert result.payment.payment_method == PaymentMethod.CASH
    assert result.payment.notes == "Payment for weekly period: 2025-01-06 to 2025-01-10"


def test_second_mark_paid_is_rejected_and_creates_no_payment(store, calculated):
    container, calc = calculated
    container.payment_service.mark_paid(calc.calculation_id, payment_date=date(2025, 1, 12))

    with pytest.raises(ConflictError):
        container.payment_service.mark_paid(calc.calculation_id, payment_date=date(2025, 1, 13))

    assert len(store.payments.rows) == 1


def test_concurrent_marker_losing_compare_and_set_is_rejected(store, calculated):
    container, calc = calculated
    # Another request flips the flag between our read and our write.
    store.payments.record_payment(
        calculation_id=calc.calculation_id,
        payment_date=date(2025, 1, 12),
        payment_method=PaymentMethod.BANK,
        notes=None,
    )

    class StaleReads:
        def get_by_id(self, calculation_id):
            return calc

    svc = PaymentService(store.payments, StaleReads())
    with pytest.raises(AlreadyPaidError):
        svc.mark_paid(calc.calculation_id)

    assert len(store.payments.rows) == 1


def test_mark_paid_unknown_calculation(store):
    with pytest.raises(NotFoundError):
        store.container().payment_service.mark_paid(404)


def test_failed_insert_leaves_calculation_unpaid(store, calculated):
    container, calc = calculated
    store.payments.fail_on_insert = PersistenceError("disk full")

    with pytest.raises(PersistenceError):
        container.payment_service.mark_paid(calc.calculation_id)

    assert store.calculations.rows[calc.calculation_id].is_paid is False
    assert store.payments.rows == {}


def test_payment_defaults_and_overrides(store, calculated, monkeypatch):
    container, calc = calculated
    monkeypatch.setattr("payroll_tracker.payments.service.today_local", lambda: date(2025, 3, 1))

    result = container.payment_service.mark_paid(calc.calculation_id, payment_method="bank", notes="  Week 2 ")

    assert result.payment.payment_date == date(2025, 3, 1)
    assert result.payment.payment_method == PaymentMethod.BANK
    assert result.payment.notes == "Week 2"


def test_unknown_payment_method_is_rejected(store, calculated):
    container, calc = calculated

    with pytest.raises(ValidationError):
        container.payment_service.mark_paid(calc.calculation_id, payment_method="crypto")

    assert store.calculations.rows[calc.calculation_id].is_paid is False
