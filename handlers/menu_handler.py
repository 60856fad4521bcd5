"""
handlers/menu_handler.py
------------------------
The menu text and one handler per menu code.
Driver failures inside a handler are fatal (see `fatal_on_error`).
"""

from typing import Callable

from services.place_service import PlaceService
from utils.errors import fatal_on_error
from utils.logger import get_logger

logger = get_logger(__name__)
place_service = PlaceService()

PRESS_ANY_KEY = "\nSuccess. Press any key to continue..."

MENU_TEXT = """
    10 connect
    11 create schema
    12 select schema
    13 create table
    14 insert row
    15 insert row using struct
    16 query row
    17 query rows
    18 get num of rows in table
    19 delete all rows
    20 quit
"""

PROMPT = "Select 10..20: "


def pause(message: str = PRESS_ANY_KEY) -> None:
    """Wait for Enter. End of input counts as Enter."""
    try:
        input(message)
    except EOFError:
        pass


def _report(text: str) -> None:
    print(text)
    pause()


@fatal_on_error("connect")
def connect_command() -> None:
    """Handle 10 - open, ping and close a connection."""
    _report(place_service.connect())


@fatal_on_error("create_schema")
def create_schema_command() -> None:
    """Handle 11 - create the schema."""
    _report(place_service.create_schema())


@fatal_on_error("select_schema")
def select_schema_command() -> None:
    """Handle 12 - set search_path for one session."""
    _report(place_service.select_schema())


@fatal_on_error("create_table")
def create_table_command() -> None:
    """Handle 13 - create the place table."""
    _report(place_service.create_table())


@fatal_on_error("insert_row")
def insert_row_command() -> None:
    """Handle 14 - insert the literal sample rows."""
    _report(place_service.insert_rows())


@fatal_on_error("insert_row_using_struct")
def insert_struct_command() -> None:
    """Handle 15 - insert one Place through named parameters."""
    _report(place_service.insert_struct())


@fatal_on_error("query_row")
def query_row_command() -> None:
    """Handle 16 - show one place."""
    _report(place_service.query_row())


@fatal_on_error("query_rows")
def query_rows_command() -> None:
    """Handle 17 - show every place."""
    _report(place_service.query_rows())


@fatal_on_error("get_num_of_rows")
def count_rows_command() -> None:
    """Handle 18 - show the row count."""
    _report(place_service.count_rows())


@fatal_on_error("delete_all_rows")
def delete_all_rows_command() -> None:
    """Handle 19 - empty the table."""
    _report(place_service.delete_all_rows())


COMMANDS: dict[int, Callable[[], None]] = {
    10: connect_command,
    11: create_schema_command,
    12: select_schema_command,
    13: create_table_command,
    14: insert_row_command,
    15: insert_struct_command,
    16: query_row_command,
    17: query_rows_command,
    18: count_rows_command,
    19: delete_all_rows_command,
}
