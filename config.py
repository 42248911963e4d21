"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "yourdbname")
DB_USER: str = os.getenv("DB_USER", "youruser")
DB_PASS: str = os.getenv("DB_PASS", "yourpassword")
DB_SSLMODE: str = os.getenv("DB_SSLMODE", "disable")

# 0 means wait forever (libpq default)
DB_CONNECT_TIMEOUT: int = int(os.getenv("DB_CONNECT_TIMEOUT", "0"))

# Full DSN or URL; when set it wins over the individual DB_* values.
DATABASE_URL: str = os.getenv("DATABASE_URL", "")

# ── Demo data ─────────────────────────────────────────────
SEED_USER_NAME: str = os.getenv("SEED_USER_NAME", "Alice")
SEED_USER_AGE: int = int(os.getenv("SEED_USER_AGE", "30"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
