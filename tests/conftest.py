from unittest.mock import MagicMock

import pytest

from db import connection


@pytest.fixture(autouse=True)
def reset_connection():
    """Every test starts and ends without a module-level connection."""
    connection._conn = None
    yield
    connection._conn = None


@pytest.fixture
def cursor():
    cur = MagicMock(name="cursor")
    cur.__iter__.return_value = iter([])
    return cur


@pytest.fixture
def fake_conn(cursor):
    """A psycopg2-like connection whose cursor() yields `cursor` in a with block."""
    conn = MagicMock(name="connection")
    conn.closed = 0
    conn.cursor.return_value.__enter__.return_value = cursor
    return conn


@pytest.fixture
def open_conn(fake_conn):
    """`fake_conn` installed as the program's open connection."""
    connection._conn = fake_conn
    return fake_conn
