"""
db/connection.py
----------------
Opens one PostgreSQL connection per operation.
Every menu command connects, runs its statements and disconnects again;
no connection outlives the operation that opened it.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2.extensions import connection as PgConnection

from config import CONNSTR
from utils.logger import get_logger

logger = get_logger(__name__)


def connect(dsn: Optional[str] = None) -> PgConnection:
    """
    Open a new database connection and verify it is alive.

    Args:
        dsn: Connection string. Defaults to ``config.CONNSTR``.

    Returns:
        An open psycopg2 connection.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        conn = psycopg2.connect(dsn or CONNSTR)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to the database: {e}")
        raise
    try:
        ping(conn)
    except psycopg2.Error as e:
        conn.close()
        logger.error(f"Failed to ping the database: {e}")
        raise
    logger.info("Database connection opened.")
    return conn


def ping(conn: PgConnection) -> None:
    """Run a trivial query to check the connection is usable."""
    with conn.cursor() as cur:
        cur.execute("SELECT 1;")
        cur.fetchone()


@contextmanager
def connection(dsn: Optional[str] = None) -> Iterator[PgConnection]:
    """
    Context manager around a single-use connection.

    Commits when the block succeeds, rolls back when it raises,
    and always closes the connection.
    """
    conn = connect(dsn)
    try:
        yield conn
        conn.commit()
    except Exception:
        if not conn.closed:
            conn.rollback()
        raise
    finally:
        conn.close()
        logger.info("Database connection closed.")
