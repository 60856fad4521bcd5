"""
main.py
-------
Entry point for the PgPlaces demo CLI.

Responsibilities:
    - Show the menu and read a numeric selection.
    - Dispatch known codes to their handlers and loop.
    - Exit with status 0 on any other code, 1 on a fatal operation error.
"""

import os
import sys
from typing import Optional

from handlers.menu_handler import COMMANDS, MENU_TEXT, PROMPT, pause
from utils.errors import OperationError
from utils.logger import get_logger

logger = get_logger(__name__)


def clear_screen() -> None:
    os.system("clear" if os.name == "posix" else "cls")


def read_choice() -> Optional[int]:
    """
    Print the menu and read one selection.

    Returns:
        The selected code, or None for non-numeric input or end of input.
    """
    print(MENU_TEXT)
    try:
        line = input(PROMPT)
    except EOFError:
        line = ""
    print()
    try:
        return int(line.strip())
    except ValueError:
        return None


def run_command(choice: int) -> None:
    """
    Run the handler for `choice`.

    A non-fatal OperationError is shown and control returns to the menu;
    a fatal one ends the process.
    """
    handler = COMMANDS[choice]
    try:
        handler()
    except OperationError as e:
        if e.fatal:
            logger.critical(str(e))
            print(str(e), file=sys.stderr)
            sys.exit(1)
        logger.warning(str(e))
        print(str(e))
        pause("\nPress any key to continue...")


def main() -> None:
    """Run the menu loop until an unknown code is entered."""
    logger.info("PgPlaces started.")
    while True:
        clear_screen()
        choice = read_choice()
        if choice not in COMMANDS:
            print("Bye")
            logger.info("PgPlaces stopped.")
            sys.exit(0)
        run_command(choice)


if __name__ == "__main__":
    main()
