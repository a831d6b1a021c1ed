from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import today_local
from ..common.http import ok, parse_date_arg, parse_int_arg
from ..core.constants import DEFAULT_CALCULATION_LIMIT
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/wages/default-period", methods=["GET"], endpoint="default_period")
    def default_period():
        today = parse_date_arg(request.args.get("today"), "today", default=today_local())
        start, end = container.wage_service.default_period(request.args.get("period_type", "weekly"), today)
        return ok({"period_start": start, "period_end": end})

    @app.route("/api/wages/calculate", methods=["POST"], endpoint="calculate_wages")
    def calculate_wages():
        data = request.get_json(silent=True) or {}
        result = container.wage_service.calculate_and_store(
            employee_id=parse_int_arg(data.get("employee_id"), "employee_id"),
            period_start=parse_date_arg(data.get("period_start"), "period_start"),
            period_end=parse_date_arg(data.get("period_end"), "period_end"),
            period_type=data.get("period_type", "weekly"),
        )
        return ok(result, 201)

    @app.route("/api/wages", methods=["GET"], endpoint="list_calculations")
    def list_calculations():
        calculations = container.wage_service.list_calculations(
            employee_id=parse_int_arg(request.args.get("employee_id"), "employee_id"),
            limit=parse_int_arg(request.args.get("limit"), "limit") or DEFAULT_CALCULATION_LIMIT,
        )
        return ok(calculations)

    @app.route("/api/wages/<int:calculation_id>", methods=["GET"], endpoint="get_calculation")
    def get_calculation(calculation_id: int):
        return ok(container.wage_service.get_calculation(calculation_id))

    @app.route("/api/wages/<int:calculation_id>/mark-paid", methods=["POST"], endpoint="mark_paid")
    def mark_paid(calculation_id: int):
        data = request.get_json(silent=True) or {}
        result = container.payment_service.mark_paid(
            calculation_id,
            payment_date=parse_date_arg(data.get("payment_date"), "payment_date"),
            payment_method=data.get("payment_method", "cash"),
            notes=data.get("notes"),
        )
        return ok(result)
