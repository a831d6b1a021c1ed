from __future__ import annotations

from flask import Flask, request

from ..common.http import ok, parse_date_arg, parse_int_arg
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        """Create or update the attendance for one employee and date."""

        data = request.get_json(silent=True) or {}
        record = container.attendance_service.mark_attendance(
            employee_id=parse_int_arg(data.get("employee_id"), "employee_id"),
            work_date=parse_date_arg(data.get("date"), "date"),
            status=data.get("status", "present"),
            overtime_hours=data.get("overtime_hours", 0),
            advance_taken=data.get("advance_taken", 0),
            notes=data.get("notes"),
        )
        return ok(record)

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="attendance_history")
    def attendance_history(employee_id: int):
        limit = parse_int_arg(request.args.get("limit"), "limit") or DEFAULT_HISTORY_LIMIT
        return ok(container.attendance_service.get_history(employee_id, limit=limit))
