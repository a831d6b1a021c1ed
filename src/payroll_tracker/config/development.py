import os

from .base import CURRENCY_SYMBOL, db_config_from_env, logging_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env(default_password="root")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOGGING_CONFIG = logging_config(LOG_LEVEL)
