import os

from .base import CURRENCY_SYMBOL, db_config_from_env, logging_config

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_password="root")

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOGGING_CONFIG = logging_config(LOG_LEVEL)
