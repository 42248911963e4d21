"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
All SQL queries related to the `users` table live here.
"""

from typing import Optional

import psycopg2

from db.connection import DatabaseError, get_connection
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for the users table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, user: User) -> User:
        """
        Insert a new user record.

        Args:
            user: The User domain object to persist.

        Returns:
            The same User with its `id` populated.

        Raises:
            DatabaseError: If the insert fails. The transaction is rolled
                back so the connection stays usable.
        """
        sql = "INSERT INTO users (name, age) VALUES (%s, %s) RETURNING id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user.name, user.age))
                new_id = cur.fetchone()[0]
            conn.commit()
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to add user {user.name!r}: {e}")
            raise DatabaseError(f"insert into users failed: {e}") from e

        # only a committed row gets an id
        user.id = new_id
        logger.info(f"Added user #{user.id} ({user.name})")
        return user

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[User]:
        """
        Fetch every row of the users table.

        Returns:
            List of User objects; empty if the table has no rows.

        Raises:
            DatabaseError: If the query, a row conversion, fetching the
                rows, or ending the read transaction fails.
        """
        sql = "SELECT id, name, age FROM users;"
        conn = get_connection()
        users = []
        try:
            with conn.cursor() as cur:
                try:
                    cur.execute(sql)
                except psycopg2.Error as e:
                    logger.error(f"Users query failed: {e}")
                    raise DatabaseError(f"failed to query users: {e}") from e

                for row in cur:
                    users.append(self._row_to_user(row))
        except DatabaseError:
            # also clears an aborted transaction; the first error wins
            self._rollback(conn)
            raise
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Fetching user rows failed: {e}")
            raise DatabaseError(f"row iteration error: {e}") from e

        # end the read transaction
        error = self._rollback(conn)
        if error is not None:
            raise DatabaseError(f"row iteration error: {error}") from error

        logger.info(f"Fetched {len(users)} user(s)")
        return users

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _rollback(conn) -> Optional[psycopg2.Error]:
        """Roll back if the connection is still open; return the driver error instead of raising it."""
        if conn.closed:
            return None
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.error(f"Rollback failed: {e}")
            return e
        return None

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        """Convert a ``(id, name, age)`` row into a User."""
        try:
            user_id, name, age = row
        except (TypeError, ValueError) as e:
            raise DatabaseError(f"failed to scan user row: expected 3 columns, got {row!r}") from e

        # NULLs or non-integer columns can't be scanned into a User
        if not isinstance(user_id, int) or not isinstance(age, int) or name is None:
            raise DatabaseError(f"failed to scan user row: cannot convert {row!r}")
        return User(id=user_id, name=name, age=age)
