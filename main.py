"""
main.py
-------
Entry point for the users demo.

Responsibilities:
    - Open the database connection and verify it with a ping.
    - Insert one demo user (a failure here is logged, not fatal).
    - Read back and print every user in the `users` table.
    - Close the connection on every exit path.
"""

import sys

from config import SEED_USER_AGE, SEED_USER_NAME
from db.connection import DatabaseError, close_connection, init_connection
from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Run connect → insert → select → print."""
    setup_logging()

    # ── 1. Connect ────────────────────────────────────────
    try:
        init_connection()
    except DatabaseError as e:
        logger.critical(f"could not initialize database connection: {e}")
        sys.exit(1)

    try:
        repo = UserRepository()

        # ── 2. Insert demo row ────────────────────────────
        # The table must already exist (see db/init_db.py); the row may
        # already be there, so a failed insert only gets logged.
        try:
            repo.add(User(name=SEED_USER_NAME, age=SEED_USER_AGE))
        except DatabaseError as e:
            logger.error(f"could not insert user: {e}")

        # ── 3. Read everything back ───────────────────────
        try:
            users = repo.get_all()
        except DatabaseError as e:
            logger.critical(f"could not get users: {e}")
            sys.exit(1)

        # ── 4. Print ──────────────────────────────────────
        print("\nUsers found in the database:")
        for user in users:
            print(user)
    finally:
        close_connection()


if __name__ == "__main__":
    main()
