import logging
import os


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "payroll_db"),
    }


def logging_config(level: str) -> dict:
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": logging.DEBUG,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    }


CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")
