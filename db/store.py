"""
db/store.py
-----------
Thin query/execute facade over the pooled psycopg2 connections.

Repositories talk to a store, never to raw connections:
    - ``query(sql, params)``   -> list of row tuples
    - ``execute(sql, params)`` -> number of affected rows
    - ``transaction()``        -> a store pinned to one connection,
                                  committed or rolled back as a unit
"""

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)


class PostgresStore:
    """
    Relational store backed by the connection pool.

    An unbound store borrows a connection per call and commits immediately.
    A bound store (obtained from ``transaction()``) reuses its connection and
    leaves commit/rollback to the enclosing transaction.
    """

    def __init__(
        self,
        conn=None,
        acquire: Callable[[], Any] = get_connection,
        release: Callable[[Any], None] = release_connection,
    ):
        self._conn = conn
        self._acquire = acquire
        self._release = release

    @property
    def in_transaction(self) -> bool:
        return self._conn is not None

    def query(self, statement: str, params: Sequence = ()) -> list[tuple]:
        """Run a SELECT and return all rows."""
        return self._run(statement, params, lambda cur: cur.fetchall())

    def execute(self, statement: str, params: Sequence = ()) -> int:
        """Run a data-modifying statement and return the affected row count."""
        return self._run(statement, params, lambda cur: cur.rowcount)

    @contextmanager
    def transaction(self) -> Iterator["PostgresStore"]:
        """
        Pin one connection for a read-then-write sequence.

        Commits on clean exit; rolls back and re-raises on any error.
        Nested calls reuse the outer transaction.
        """
        if self._conn is not None:
            yield self
            return

        conn = self._acquire()
        try:
            yield PostgresStore(conn, self._acquire, self._release)
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Transaction rolled back: {e}")
            raise
        finally:
            self._release(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _run(self, statement: str, params: Sequence, collect: Callable[[Any], Any]) -> Any:
        if self._conn is not None:
            with self._conn.cursor() as cur:
                cur.execute(statement, tuple(params))
                return collect(cur)

        conn = self._acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(statement, tuple(params))
                result = collect(cur)
            conn.commit()
            return result
        except Exception as e:
            conn.rollback()
            logger.error(f"Statement failed: {e}")
            raise
        finally:
            self._release(conn)


_default_store: Optional[PostgresStore] = None


def get_store() -> PostgresStore:
    """Return the process-wide store bound to the shared pool."""
    global _default_store
    if _default_store is None:
        _default_store = PostgresStore()
    return _default_store
