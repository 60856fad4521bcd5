"""
utils/errors.py
---------------
Error types raised by menu operations, and the decorator that turns
driver failures into fatal operation errors.
"""

from functools import wraps
from typing import Callable

import psycopg2

from utils.logger import get_logger

logger = get_logger(__name__)


class OperationError(Exception):
    """
    A menu operation failed.

    Attributes:
        operation: Name of the failing operation (e.g. 'create_table').
        message: Human-readable cause.
        fatal: If True the command loop aborts the process.
    """

    def __init__(self, operation: str, message: str, fatal: bool = True):
        self.operation = operation
        self.message = message
        self.fatal = fatal
        super().__init__(f"func {operation} failed - {message}")


class RowMappingError(Exception):
    """A fetched row could not be mapped onto a model."""


class PlaceNotFoundError(OperationError):
    """A single-row query matched nothing. The loop can carry on."""

    def __init__(self, operation: str, telcode: int):
        self.telcode = telcode
        super().__init__(operation, f"no place with telephone code {telcode}", fatal=False)


def fatal_on_error(operation: str) -> Callable:
    """
    Decorator that converts any psycopg2 error or row-mapping failure
    raised by a handler into a fatal OperationError.

    Usage:
        @fatal_on_error("create_schema")
        def create_schema_command():
            ...

    Behavior:
        - Connection, statement and row-mapping failures are all treated alike.
        - The failure is logged with the operation name as prefix.
        - OperationError raised inside the handler passes through untouched.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (psycopg2.Error, RowMappingError) as e:
                error = OperationError(operation, str(e).strip())
                logger.error(str(error))
                raise error from e
        return wrapper
    return decorator
