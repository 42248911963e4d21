"""
db/init_db.py
-------------
Creates the `users` table if it does not already exist.
The demo program expects the table to be there; run this module
once against a fresh database:
    python -m db.init_db
"""

import psycopg2

from db.connection import DatabaseError, get_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: one row per user record read back by the demo
CREATE TABLE IF NOT EXISTS users (
    id      SERIAL PRIMARY KEY,
    name    VARCHAR(50),
    age     INT
);
"""


def create_tables() -> None:
    """
    Execute the schema SQL.
    Safe to call multiple times (uses IF NOT EXISTS).

    Raises:
        DatabaseError: If the schema could not be created.
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except psycopg2.Error as e:
        try:
            conn.rollback()
        except psycopg2.Error as rollback_error:
            logger.error(f"Rollback failed: {rollback_error}")
        logger.error(f"Failed to initialize schema: {e}")
        raise DatabaseError(f"could not create schema: {e}") from e


if __name__ == "__main__":
    from db.connection import init_connection, close_connection
    init_connection()
    try:
        create_tables()
    finally:
        close_connection()
    print("✅ Database schema created successfully.")
