"""Process-wide database handle.

The handle is created lazily on the first `connect()` call and reused by every
request afterwards. `close_connection()` drops it again (used by tests and on
shutdown). Actual MySQL connections are short-lived and opened per operation.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import mysql.connector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    connection_timeout: int = 15

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "geo_attendance")),
            connection_timeout=int(db_config.get("connection_timeout", 15)),
        )


class DatabaseConnection:
    """Connection factory bound to one DBConfig."""

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
            connection_timeout=self._config.connection_timeout,
        )


_lock = threading.Lock()
_instance: Optional[DatabaseConnection] = None


def connect(config: DBConfig) -> DatabaseConnection:
    """Initialize the shared handle once; later calls return the same handle."""
    global _instance
    with _lock:
        if _instance is None:
            _instance = DatabaseConnection(config)
            logger.info(
                "Database handle ready: %s@%s:%s/%s",
                config.user, config.host, config.port, config.database,
            )
        elif _instance.config != config:
            logger.warning("connect() called with a different config; keeping the existing handle")
        return _instance


def get_connection() -> DatabaseConnection:
    with _lock:
        if _instance is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return _instance


def close_connection() -> None:
    global _instance
    with _lock:
        _instance = None
