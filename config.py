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
DB_NAME: str = os.getenv("DB_NAME", "postgres")
DB_USER: str = os.getenv("DB_USER", "postgres")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# A full connection string wins over the individual parts
CONNSTR: str = os.getenv("CONNSTR", "") or DATABASE_URL

# Schema holding the `place` table
DB_SCHEMA: str = os.getenv("DB_SCHEMA", "test6")

# ── Logging ───────────────────────────────────────────────
LOG_FILE: str = os.getenv("LOG_FILE", "log.txt")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
