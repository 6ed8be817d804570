from unittest.mock import MagicMock

import pytest

from db import connection
from db.store import PostgresStore


def _mock_conn(rows=None, rowcount=1):
    conn = MagicMock()
    cur = conn.cursor.return_value.__enter__.return_value
    cur.fetchall.return_value = rows or []
    cur.rowcount = rowcount
    return conn, cur


def _store_for(conn):
    released = []
    store = PostgresStore(acquire=lambda: conn, release=released.append)
    return store, released


def test_query_returns_rows_and_releases():
    conn, cur = _mock_conn(rows=[(1,), (2,)])
    store, released = _store_for(conn)

    assert store.query("SELECT 1", [5]) == [(1,), (2,)]
    cur.execute.assert_called_once_with("SELECT 1", (5,))
    conn.commit.assert_called_once()
    assert released == [conn]


def test_execute_returns_rowcount():
    conn, _ = _mock_conn(rowcount=3)
    store, _ = _store_for(conn)
    assert store.execute("UPDATE x", (1,)) == 3


def test_failed_statement_rolls_back_and_raises():
    conn, cur = _mock_conn()
    cur.execute.side_effect = RuntimeError("boom")
    store, released = _store_for(conn)

    with pytest.raises(RuntimeError):
        store.execute("UPDATE x")
    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()
    assert released == [conn]


def test_transaction_commits_once_for_all_statements():
    conn, cur = _mock_conn(rows=[(10,)], rowcount=1)
    store, released = _store_for(conn)

    with store.transaction() as tx:
        assert tx.in_transaction
        assert tx.query("SELECT") == [(10,)]
        assert tx.execute("UPDATE") == 1
        conn.commit.assert_not_called()

    conn.commit.assert_called_once()
    assert released == [conn]


def test_transaction_rolls_back_on_error():
    conn, _ = _mock_conn()
    store, released = _store_for(conn)

    with pytest.raises(ValueError):
        with store.transaction() as tx:
            tx.execute("UPDATE")
            raise ValueError("stop")

    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()
    assert released == [conn]


def test_nested_transaction_reuses_connection():
    conn, _ = _mock_conn()
    store, released = _store_for(conn)

    with store.transaction() as outer:
        with outer.transaction() as inner:
            assert inner is outer
    conn.commit.assert_called_once()
    assert released == [conn]


def test_store_without_pool_raises(monkeypatch):
    monkeypatch.setattr(connection, "_pool", None)
    with pytest.raises(RuntimeError, match="not initialized"):
        PostgresStore(acquire=connection.get_connection).query("SELECT 1")
