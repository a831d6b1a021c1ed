from __future__ import annotations

import importlib
import logging
import logging.config
from typing import Optional

import click
from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def _describe_db(db_config: dict) -> str:
    return f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    ``container`` lets callers (tests, scripts) supply prebuilt services;
    otherwise the MySQL-backed container is built from the selected settings.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.config.dictConfig(getattr(settings, "LOGGING_CONFIG"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["CURRENCY_SYMBOL"] = getattr(settings, "CURRENCY_SYMBOL", "$")
    db_config = dict(getattr(settings, "DB_CONFIG"))
    app.config["DB_CONFIG"] = db_config

    logger.info("[payroll-tracker] settings=%s db=%s", settings_module, _describe_db(db_config))

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("[payroll-tracker] schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config)

    register_error_handlers(app)
    register_employees(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_reports(app, container)

    @app.cli.command("init-db")
    def init_db_command():
        """Apply schema.sql to the configured database."""

        apply_schema(app.config["DB_CONFIG"])
        tables = list_tables(app.config["DB_CONFIG"])
        click.echo(f"OK: Applied schema.sql -> {_describe_db(app.config['DB_CONFIG'])} (tables={len(tables)})")

    return app
