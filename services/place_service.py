"""
services/place_service.py
-------------------------
Business logic behind the menu commands.
Orchestrates schema setup and the PlaceRepository, and turns
results into console text.
"""

from typing import Optional

from config import DB_SCHEMA
from db import init_db
from db.connection import connection
from models.place import Place
from repositories.place_repo import PlaceRepository
from utils.errors import PlaceNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

# (country, city, telcode); None city is stored as NULL
SAMPLE_PLACES: list[tuple] = [
    ("Hong Kong", None, 852),
    ("Hungary", "Budapest", 36),
    ("Singapore", None, 65),
    ("Ukraine", "Kiyv", 38),
    ("South Africa", "Johannesburg", 27),
]

STRUCT_PLACE = Place(country="Germany", city="Berlin", telephone_code=49)

QUERY_TELCODE = 852


class PlaceService:
    """
    Handles every menu operation.

    Each method opens its own connection (through the repository or
    init_db), runs its statements and returns text for the console.
    Driver errors propagate to the caller.
    """

    def __init__(self, schema: str = DB_SCHEMA, dsn: Optional[str] = None):
        self.schema = schema
        self.dsn = dsn
        self.repo = PlaceRepository(schema, dsn)

    def connect(self) -> str:
        """Open and ping a connection, then close it again."""
        with connection(self.dsn) as conn:
            version = conn.server_version
        major, minor = divmod(version, 10000)
        return f"Connected to PostgreSQL {major}.{minor}"

    def create_schema(self) -> str:
        init_db.create_schema(self.schema, self.dsn)
        return f"Schema '{self.schema}' created."

    def select_schema(self) -> str:
        search_path = init_db.select_schema(self.schema, self.dsn)
        return f"search_path is {search_path} (this session only)"

    def create_table(self) -> str:
        init_db.create_table(self.schema, self.dsn)
        return f"Table '{self.schema}.place' created."

    def insert_rows(self) -> str:
        """Insert the fixed sample rows, some of them without a city."""
        inserted = self.repo.insert_rows(SAMPLE_PLACES)
        return f"Inserted rows: {inserted}"

    def insert_struct(self, place: Place = STRUCT_PLACE) -> str:
        """Insert one Place mapped onto named parameters."""
        affected = self.repo.add(place)
        return f"Affected rows: {affected}"

    def query_row(self, telcode: int = QUERY_TELCODE) -> str:
        """
        Fetch one place by telephone code.

        Raises:
            PlaceNotFoundError: If no row has that code.
        """
        place = self.repo.get_by_telcode(telcode)
        if place is None:
            logger.info(f"No place found with telcode {telcode}")
            raise PlaceNotFoundError("query_row", telcode)
        return str(place)

    def query_rows(self) -> str:
        places = self.repo.get_all()
        if not places:
            return "No rows in table."
        return "\n".join(str(p) for p in places)

    def count_rows(self) -> str:
        return f"Num of rows in table: {self.repo.count()}"

    def delete_all_rows(self) -> str:
        deleted = self.repo.delete_all()
        return f"Deleted rows: {deleted}"
