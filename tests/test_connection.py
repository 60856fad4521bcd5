"""
Tests for db/connection.py.
"""

import psycopg2
import pytest

from db.connection import connect, connection


def test_connect_pings(mock_db):
    connect_fn, conn, cur = mock_db
    assert connect("postgresql://x") is conn
    connect_fn.assert_called_once_with("postgresql://x")
    cur.execute.assert_called_once_with("SELECT 1;")


def test_connect_failure_propagates(mock_db):
    connect_fn, _, _ = mock_db
    connect_fn.side_effect = psycopg2.OperationalError("could not connect")
    with pytest.raises(psycopg2.OperationalError):
        connect("postgresql://x")


def test_failed_ping_closes_connection(mock_db):
    _, conn, cur = mock_db
    cur.execute.side_effect = psycopg2.OperationalError("server closed the connection")
    with pytest.raises(psycopg2.OperationalError):
        connect("postgresql://x")
    conn.close.assert_called_once()


def test_connection_commits_and_closes(mock_db):
    _, conn, _ = mock_db
    with connection("postgresql://x") as c:
        assert c is conn
    conn.commit.assert_called_once()
    conn.rollback.assert_not_called()
    conn.close.assert_called_once()


def test_connection_rolls_back_on_error(mock_db):
    _, conn, _ = mock_db
    with pytest.raises(RuntimeError):
        with connection("postgresql://x"):
            raise RuntimeError("boom")
    conn.commit.assert_not_called()
    conn.rollback.assert_called_once()
    conn.close.assert_called_once()


def test_connection_skips_rollback_when_closed(mock_db):
    _, conn, _ = mock_db

    def broken():
        conn.closed = 2
        raise psycopg2.OperationalError("server closed the connection unexpectedly")

    with pytest.raises(psycopg2.OperationalError, match="server closed"):
        with connection("postgresql://x"):
            broken()
    conn.rollback.assert_not_called()
    conn.close.assert_called_once()
