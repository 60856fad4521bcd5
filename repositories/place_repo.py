"""
repositories/place_repo.py
--------------------------
Data access layer for places.
All SQL queries related to the `place` table live here.
"""

from typing import Iterable, Optional

import psycopg2
from psycopg2 import extras, sql

from config import DB_SCHEMA
from db.connection import connection
from models.place import Place
from utils.logger import get_logger

logger = get_logger(__name__)


class PlaceRepository:
    """Repository for operations on the `<schema>.place` table."""

    def __init__(self, schema: str = DB_SCHEMA, dsn: Optional[str] = None):
        self.schema = schema
        self.dsn = dsn
        self.table = sql.Identifier(schema, "place")

    # ── CREATE ────────────────────────────────────────────

    def insert_rows(self, rows: Iterable[tuple]) -> int:
        """
        Insert literal rows, one statement per row, over a single connection.

        Args:
            rows: ``(country, city, telcode)`` tuples. A ``None`` city is
                left out of the column list and stored as NULL.

        Returns:
            Number of rows inserted.
        """
        without_city = sql.SQL(
            "INSERT INTO {table} (country, telcode) VALUES (%s, %s);"
        ).format(table=self.table)
        with_city = sql.SQL(
            "INSERT INTO {table} (country, city, telcode) VALUES (%s, %s, %s);"
        ).format(table=self.table)

        inserted = 0
        with connection(self.dsn) as conn:
            with conn.cursor() as cur:
                for country, city, telcode in rows:
                    try:
                        if city is None:
                            cur.execute(without_city, (country, telcode))
                        else:
                            cur.execute(with_city, (country, city, telcode))
                    except psycopg2.Error as e:
                        logger.error(f"Failed to insert place ({country}): {e}")
                        raise
                    inserted += cur.rowcount
        logger.info(f"Inserted {inserted} literal rows into {self.schema}.place")
        return inserted

    def add(self, place: Place) -> int:
        """
        Insert a Place by mapping its fields to named parameters.

        Args:
            place: The Place to persist.

        Returns:
            Number of affected rows.
        """
        stmt = sql.SQL(
            "INSERT INTO {table} (country, city, telcode) "
            "VALUES (%(country)s, %(city)s, %(telcode)s);"
        ).format(table=self.table)
        with connection(self.dsn) as conn:
            with conn.cursor() as cur:
                try:
                    cur.execute(stmt, place.to_row())
                except psycopg2.Error as e:
                    logger.error(f"Failed to add place ({place.country}): {e}")
                    raise
                affected = cur.rowcount
        logger.info(f"affectedRow: {affected}")
        return affected

    # ── READ ──────────────────────────────────────────────

    def get_by_telcode(self, telcode: int) -> Optional[Place]:
        """
        Fetch the first place with the given telephone code.

        Returns:
            A Place object or None if not found.
        """
        stmt = sql.SQL("SELECT * FROM {table} WHERE telcode = %s;").format(table=self.table)
        with connection(self.dsn) as conn:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                try:
                    cur.execute(stmt, (telcode,))
                    row = cur.fetchone()
                except psycopg2.Error as e:
                    logger.error(f"Failed to fetch place with telcode {telcode}: {e}")
                    raise
        return Place.from_row(row) if row else None

    def get_all(self) -> list[Place]:
        """
        Fetch every place in the table.

        Returns:
            List of Place objects ordered by id.
        """
        stmt = sql.SQL("SELECT * FROM {table} ORDER BY id;").format(table=self.table)
        with connection(self.dsn) as conn:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                try:
                    cur.execute(stmt)
                    rows = cur.fetchall()
                except psycopg2.Error as e:
                    logger.error(f"Failed to fetch places: {e}")
                    raise
        return [Place.from_row(r) for r in rows]

    def count(self) -> int:
        """Return the number of rows in the table."""
        stmt = sql.SQL("SELECT COUNT(*) FROM {table};").format(table=self.table)
        with connection(self.dsn) as conn:
            with conn.cursor() as cur:
                try:
                    cur.execute(stmt)
                    return cur.fetchone()[0]
                except psycopg2.Error as e:
                    logger.error(f"Failed to count places: {e}")
                    raise

    # ── DELETE ────────────────────────────────────────────

    def delete_all(self) -> int:
        """
        Delete every row in the table.

        Returns:
            Number of rows deleted.
        """
        stmt = sql.SQL("DELETE FROM {table};").format(table=self.table)
        with connection(self.dsn) as conn:
            with conn.cursor() as cur:
                try:
                    cur.execute(stmt)
                except psycopg2.Error as e:
                    logger.error(f"Failed to delete places: {e}")
                    raise
                deleted = cur.rowcount
        logger.info(f"Deleted {deleted} rows from {self.schema}.place")
        return deleted
