"""
Runs against a real PostgreSQL server. Set TEST_DATABASE_URL to enable;
each test works on a session-local TEMP `users` table, so no data in the
target database is touched.
"""

import os

import pytest

from db import connection
from db.connection import DatabaseError, close_connection, get_connection, init_connection
from models.user import User
from repositories.user_repo import UserRepository

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not TEST_DATABASE_URL, reason="TEST_DATABASE_URL not set"),
]

USERS_DDL = "CREATE TEMP TABLE users (id SERIAL PRIMARY KEY, name VARCHAR(50), age INT);"


def _create_temp_table(ddl: str) -> None:
    conn = get_connection()
    with conn.cursor() as cur:
        cur.execute(ddl)
    conn.commit()


@pytest.fixture
def db():
    init_connection(TEST_DATABASE_URL)
    yield get_connection()
    close_connection()


def test_valid_dsn_connects_and_pings(db):
    connection.ping(db)
    assert db.closed == 0


def test_invalid_dsn_raises_connection_error():
    with pytest.raises(DatabaseError, match="unable to connect to database"):
        init_connection("host=127.0.0.1 port=1 dbname=nope user=nope connect_timeout=2")


def test_insert_then_query_returns_inserted_user(db):
    _create_temp_table(USERS_DDL)
    repo = UserRepository()

    added = repo.add(User(name="Alice", age=30))
    users = repo.get_all()

    assert added.id is not None
    assert User(id=added.id, name="Alice", age=30) in users


def test_query_on_empty_table_returns_empty_list(db):
    _create_temp_table(USERS_DDL)
    assert UserRepository().get_all() == []


def test_query_against_wrong_columns_is_an_error(db):
    _create_temp_table("CREATE TEMP TABLE users (id SERIAL PRIMARY KEY, nme VARCHAR(50), age INT);")

    with pytest.raises(DatabaseError, match="failed to query users"):
        UserRepository().get_all()
    # connection is still usable afterwards
    connection.ping(db)


def test_insert_failure_leaves_connection_usable(db):
    _create_temp_table(
        "CREATE TEMP TABLE users (id SERIAL PRIMARY KEY, name VARCHAR(50) UNIQUE, age INT);"
    )
    repo = UserRepository()
    repo.add(User(name="Alice", age=30))

    with pytest.raises(DatabaseError, match="insert into users failed"):
        repo.add(User(name="Alice", age=30))

    assert [u.name for u in repo.get_all()] == ["Alice"]


def test_repeated_connect_close_releases_connections():
    opened = []
    for _ in range(5):
        opened.append(init_connection(TEST_DATABASE_URL))
        close_connection()

    assert all(conn.closed for conn in opened)
    assert len({id(conn) for conn in opened}) == 5
