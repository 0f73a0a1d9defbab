from __future__ import annotations

import pytest

from geo_attendance.database import connection
from geo_attendance.database.connection import DBConfig


@pytest.fixture(autouse=True)
def _isolated_handle():
    connection.close_connection()
    yield
    connection.close_connection()


def _config(**overrides) -> DBConfig:
    return DBConfig.from_dict({"host": "db", "user": "app", "password": "pw", "database": "att", **overrides})


def test_get_connection_before_connect_raises():
    with pytest.raises(RuntimeError):
        connection.get_connection()


def test_connect_initializes_once():
    first = connection.connect(_config())
    second = connection.connect(_config(port=3307))

    assert first is second
    assert connection.get_connection() is first
    assert first.config.port == 3306


def test_close_connection_allows_reinitialization():
    first = connection.connect(_config())
    connection.close_connection()

    second = connection.connect(_config(database="other"))

    assert second is not first
    assert second.config.database == "other"


def test_db_config_defaults():
    cfg = DBConfig.from_dict({})

    assert cfg.host == "localhost"
    assert cfg.port == 3306
    assert cfg.database == "geo_attendance"
