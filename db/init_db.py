"""
db/init_db.py
-------------
Creates the schema and the `place` table if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from typing import Optional

from psycopg2 import sql

from config import DB_SCHEMA
from db.connection import connection
from utils.logger import get_logger

logger = get_logger(__name__)

CREATE_SCHEMA_SQL = sql.SQL("CREATE SCHEMA IF NOT EXISTS {schema};")

SET_SEARCH_PATH_SQL = sql.SQL("SET search_path TO {schema};")

CREATE_TABLE_SQL = sql.SQL("""
CREATE TABLE IF NOT EXISTS {table} (
    id          SERIAL PRIMARY KEY,
    country     TEXT,
    city        TEXT,
    telcode     INTEGER
);
""")


def create_schema(schema: str = DB_SCHEMA, dsn: Optional[str] = None) -> None:
    """
    Create the schema. Safe to call multiple times (uses IF NOT EXISTS).
    """
    with connection(dsn) as conn:
        with conn.cursor() as cur:
            cur.execute(CREATE_SCHEMA_SQL.format(schema=sql.Identifier(schema)))
    logger.info(f"Schema '{schema}' is ready.")


def select_schema(schema: str = DB_SCHEMA, dsn: Optional[str] = None) -> str:
    """
    Set the search path to `schema` and return the resulting path.

    The setting only lives as long as the session, and every operation
    opens its own session, so later commands do not see it.
    """
    with connection(dsn) as conn:
        with conn.cursor() as cur:
            cur.execute(SET_SEARCH_PATH_SQL.format(schema=sql.Identifier(schema)))
            cur.execute("SHOW search_path;")
            search_path = cur.fetchone()[0]
    logger.info(f"search_path set to {search_path} for one session.")
    return search_path


def create_table(schema: str = DB_SCHEMA, dsn: Optional[str] = None) -> None:
    """
    Create `<schema>.place`. Safe to call multiple times (uses IF NOT EXISTS).
    """
    with connection(dsn) as conn:
        with conn.cursor() as cur:
            cur.execute(CREATE_TABLE_SQL.format(table=sql.Identifier(schema, "place")))
    logger.info(f"Table '{schema}.place' is ready.")


if __name__ == "__main__":
    create_schema()
    create_table()
    print(f"✅ Schema '{DB_SCHEMA}' and table '{DB_SCHEMA}.place' created successfully.")
