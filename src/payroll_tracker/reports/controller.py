from __future__ import annotations

from flask import Flask, current_app, request

from ..common.datetime_utils import month_to_date, today_local
from ..common.http import ok, parse_date_arg, parse_int_arg
from ..container import Container
from .csv_export import export_csv, export_filename


def register(app: Flask, container: Container) -> None:
    def _range():
        default_start, default_end = month_to_date(today_local())
        start = parse_date_arg(request.args.get("start"), "start", default=default_start)
        end = parse_date_arg(request.args.get("end"), "end", default=default_end)
        return start, end

    @app.route("/api/reports/payments", methods=["GET"], endpoint="payment_report")
    def payment_report():
        start, end = _range()
        report = container.payment_report_service.list_payments(
            start=start,
            end=end,
            employee_id=parse_int_arg(request.args.get("employee_id"), "employee_id"),
        )
        return ok(
            {
                "start": report.start,
                "end": report.end,
                "payment_count": report.payment_count,
                "total_amount": report.total_amount,
                "payments": report.rows,
            }
        )

    @app.route("/api/reports/summary", methods=["GET"], endpoint="payment_summary")
    def payment_summary():
        start, end = _range()
        return ok(container.payment_report_service.summarize_by_employee(start=start, end=end))

    @app.route("/api/reports/payments.csv", methods=["GET"], endpoint="payment_report_csv")
    def payment_report_csv():
        start, end = _range()
        report = container.payment_report_service.list_payments(
            start=start,
            end=end,
            employee_id=parse_int_arg(request.args.get("employee_id"), "employee_id"),
        )

        symbol = current_app.config.get("CURRENCY_SYMBOL", "$")
        csv_bytes = export_csv(report, currency_symbol=symbol).encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export_filename(report)}"},
        )
