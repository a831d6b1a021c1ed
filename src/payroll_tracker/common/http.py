from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import ConflictError, DomainError, NotFoundError, PersistenceError, ValidationError
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def to_jsonable(value: Any) -> Any:
    """Convert domain dataclasses into JSON-friendly structures.

    Decimals become strings so currency values keep their exact digits.
    """

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def parse_date_arg(value: Any, field_name: str, default: Optional[date] = None) -> Optional[date]:
    if value is None or value == "":
        return default
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def parse_int_arg(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "" or value == "all":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def ok(payload: Any = None, status: int = 200):
    body = {"success": True}
    if payload is not None:
        body["data"] = to_jsonable(payload)
    return jsonify(body), status


def _error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return _error(str(e), 400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return _error(str(e), 404)

    @app.errorhandler(ConflictError)
    def _conflict(e: ConflictError):
        return _error(str(e), 409)

    @app.errorhandler(PersistenceError)
    def _persistence(e: PersistenceError):
        logger.error("Persistence failure: %s", e)
        return _error("Database error, please retry", 503)

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return _error(str(e), 400)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        return _error("Internal server error", 500)
