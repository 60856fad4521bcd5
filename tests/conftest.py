"""
Shared pytest fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock, patch

import pytest

# Keep test log records out of the working directory.
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "pgplaces-test.log"))


@pytest.fixture
def mock_db():
    """
    Patch psycopg2.connect with a fake connection.

    Yields:
        (connect, conn, cur): the patched connect function, the connection
        it returns and the cursor every `conn.cursor()` block receives.
    """
    with patch("db.connection.psycopg2.connect") as connect:
        conn = MagicMock()
        conn.server_version = 150004
        conn.closed = 0
        cur = MagicMock()
        conn.cursor.return_value.__enter__.return_value = cur
        connect.return_value = conn
        yield connect, conn, cur


@pytest.fixture
def executed(mock_db):
    """Return the (query, params) pairs run on the cursor, ping excluded."""
    _, _, cur = mock_db

    def _executed():
        calls = []
        for c in cur.execute.call_args_list:
            query = c.args[0]
            if query == "SELECT 1;":
                continue
            params = c.args[1] if len(c.args) > 1 else None
            calls.append((query, params))
        return calls

    return _executed
