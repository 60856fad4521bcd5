"""
models/place.py
---------------
Domain model for a place and its telephone code.
"""

from dataclasses import dataclass
from typing import Optional

from utils.errors import RowMappingError


@dataclass
class Place:
    """
    Represents a single row of the `place` table.

    Attributes:
        country: Country name.
        telephone_code: International dialing code (column `telcode`).
        city: Optional city name; NULL in the database when missing.
        id: Database primary key (None for new records).
    """
    country: str
    telephone_code: int
    city: Optional[str] = None
    id: Optional[int] = None

    def to_row(self) -> dict:
        """Map fields to column names, for named-parameter inserts."""
        return {
            "country": self.country,
            "city": self.city,
            "telcode": self.telephone_code,
        }

    @classmethod
    def from_row(cls, row: dict) -> "Place":
        """
        Build a Place from a row keyed by column name.

        Raises:
            RowMappingError: If a required column is missing or `telcode` is NULL.
        """
        missing = [c for c in ("id", "country", "city", "telcode") if c not in row]
        if missing:
            raise RowMappingError(f"missing column(s) {', '.join(missing)} in place row")
        if row["telcode"] is None:
            raise RowMappingError(f"NULL telcode for place id {row['id']}")
        return cls(
            id=row["id"],
            country=row["country"],
            city=row["city"],
            telephone_code=row["telcode"],
        )

    def __str__(self) -> str:
        city = self.city if self.city is not None else "N.A"
        return f"{self.country}, {city}, {self.telephone_code}"
