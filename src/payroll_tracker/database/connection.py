from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "payroll_db")),
        )


class DatabaseConnection:
    """DB connection factory, one per distinct DBConfig.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    """

    _instances: Dict[DBConfig, "DatabaseConnection"] = {}

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        instance = cls._instances.get(config)
        if instance is None:
            instance = cls._instances[config] = DatabaseConnection(config)
        return instance

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )
