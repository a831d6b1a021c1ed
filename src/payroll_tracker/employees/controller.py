from __future__ import annotations

from flask import Flask, request

from ..common.http import ok
from ..container import Container

_FIELDS = ("name", "email", "phone", "position", "daily_wage", "overtime_rate", "half_day_rate")


def _form() -> dict:
    data = request.get_json(silent=True) or {}
    return {k: data.get(k) for k in _FIELDS if k in data}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        active_only = request.args.get("active") in {"1", "true", "yes"}
        return ok(container.employee_service.list_employees(active_only=active_only))

    @app.route("/api/employees", methods=["POST"], endpoint="register_employee")
    def register_employee():
        employee = container.employee_service.register(**_form())
        return ok(employee, 201)

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        return ok(container.employee_service.get(employee_id))

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        return ok(container.employee_service.update(employee_id, **_form()))

    @app.route("/api/employees/<int:employee_id>/deactivate", methods=["POST"], endpoint="deactivate_employee")
    def deactivate_employee(employee_id: int):
        return ok(container.employee_service.deactivate(employee_id))

    @app.route("/api/employees/<int:employee_id>/activate", methods=["POST"], endpoint="activate_employee")
    def activate_employee(employee_id: int):
        return ok(container.employee_service.activate(employee_id))

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        deleted = container.employee_service.remove(employee_id)
        return ok({"deleted": deleted, "deactivated": not deleted})
