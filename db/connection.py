"""
db/connection.py
----------------
Manages the single PostgreSQL connection used by the program.
The connection is opened once at startup, checked with a ping,
and closed once on exit.
"""

from typing import Optional

import psycopg2
from psycopg2.extensions import connection as PgConnection, make_dsn, parse_dsn

import config
from utils.logger import get_logger

logger = get_logger(__name__)

_conn: Optional[PgConnection] = None


class DatabaseError(Exception):
    """Wraps a driver error with the step that failed; the driver error is ``__cause__``."""


def build_dsn(
    user: Optional[str] = None,
    password: Optional[str] = None,
    dbname: Optional[str] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
    sslmode: Optional[str] = None,
    connect_timeout: Optional[int] = None,
) -> str:
    """
    Build a libpq ``key=value`` connection string.
    Arguments left as None are read from ``config`` at call time.

    Returns:
        e.g. ``user=youruser password=yourpassword dbname=yourdbname
        host=localhost port=5432 sslmode=disable``
    """
    params = {
        "user": config.DB_USER if user is None else user,
        "password": config.DB_PASS if password is None else password,
        "dbname": config.DB_NAME if dbname is None else dbname,
        "host": config.DB_HOST if host is None else host,
        "port": config.DB_PORT if port is None else port,
        "sslmode": config.DB_SSLMODE if sslmode is None else sslmode,
    }
    if connect_timeout is None:
        connect_timeout = config.DB_CONNECT_TIMEOUT
    if connect_timeout:
        params["connect_timeout"] = connect_timeout
    return make_dsn(**params)


def with_connect_timeout(dsn: str, connect_timeout: Optional[int] = None) -> str:
    """
    Add ``connect_timeout`` to a DSN or URL that does not set one.

    Args:
        dsn: libpq connection string or ``postgresql://`` URL.
        connect_timeout: Seconds; defaults to ``DB_CONNECT_TIMEOUT``. 0 leaves
            the DSN unchanged.

    Raises:
        psycopg2.ProgrammingError: If the DSN can't be parsed.
    """
    if connect_timeout is None:
        connect_timeout = config.DB_CONNECT_TIMEOUT
    if not connect_timeout or "connect_timeout" in parse_dsn(dsn):
        return dsn
    return make_dsn(dsn, connect_timeout=connect_timeout)


def ping(conn: PgConnection) -> None:
    """
    Liveness check: one ``SELECT 1`` round trip.

    Raises:
        psycopg2.Error: If the server does not answer.
    """
    with conn.cursor() as cur:
        cur.execute("SELECT 1;")
        cur.fetchone()
    # don't leave the implicit transaction open
    conn.rollback()


def init_connection(dsn: Optional[str] = None) -> PgConnection:
    """
    Open the database connection and verify it is alive.

    Args:
        dsn: libpq connection string or URL. Defaults to ``DATABASE_URL``
            when set, else the string built from the ``DB_*`` settings.

    Returns:
        The open psycopg2 connection.

    Raises:
        DatabaseError: If the connection or the ping fails.
    """
    global _conn
    if _conn is not None and not _conn.closed:
        return _conn

    try:
        if dsn or config.DATABASE_URL:
            dsn = with_connect_timeout(dsn or config.DATABASE_URL)
        else:
            dsn = build_dsn()
        conn = psycopg2.connect(dsn)
    except psycopg2.Error as e:
        logger.error(f"Connection to database failed: {e}")
        raise DatabaseError(f"unable to connect to database: {e}") from e

    try:
        ping(conn)
    except psycopg2.Error as e:
        logger.error(f"Database ping failed: {e}")
        conn.close()
        raise DatabaseError(f"database ping failed: {e}") from e

    _conn = conn
    logger.info("Database connection established.")
    print("Successfully connected to the database!")
    return _conn


def get_connection() -> PgConnection:
    """
    Get the open connection.

    Raises:
        RuntimeError: If the connection has not been initialized.
    """
    if _conn is None:
        raise RuntimeError("Database connection not initialized. Call init_connection() first.")
    return _conn


def close_connection() -> None:
    """Close the connection. Does nothing if none is open."""
    global _conn
    if _conn is not None:
        if not _conn.closed:
            _conn.close()
        _conn = None
        logger.info("Database connection closed.")
