"""SQLite store handle: one shared connection behind one lock."""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Generator

from catalogdesk.storage.errors import (
    ConstraintViolation,
    StoreIO,
    StoreUnavailable,
)
from catalogdesk.storage.schema import create_schema

logger = logging.getLogger(__name__)


class StoreHandle:
    """Owns the single connection to the database file.

    Every access operation runs inside :meth:`connection`, which holds the
    lock for the full duration of the call, so statements from different
    operations never interleave. Reads and writes share the same lock.
    """

    def __init__(self, database_path: str) -> None:
        self.database_path = database_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._conn is not None

    def initialize(self) -> None:
        """Open the database file and create the schema. No-op when already open.

        Raises StoreUnavailable if the file cannot be opened or the schema
        cannot be created.
        """
        with self._lock:
            if self._conn is not None:
                return
            conn = None
            try:
                # Called from the web worker pool; the lock serializes access.
                conn = sqlite3.connect(self.database_path, check_same_thread=False)
                conn.execute("PRAGMA journal_mode=WAL")
                conn.row_factory = sqlite3.Row
                create_schema(conn)
                conn.commit()
            except (sqlite3.Error, OSError) as exc:
                if conn is not None:
                    conn.close()
                raise StoreUnavailable(
                    f"Failed to initialize database at {self.database_path}: {exc}"
                ) from exc
            self._conn = conn
        logger.info("Database initialized at %s", self.database_path)

    def close(self) -> None:
        """Close the connection. Later operations fail with StoreUnavailable."""
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
        logger.info("Database closed at %s", self.database_path)

    @contextmanager
    def connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Hold the lock and yield the shared connection.

        Commits on clean exit, rolls back on exception. sqlite3 errors are
        re-raised as ConstraintViolation or StoreIO.
        """
        with self._lock:
            conn = self._conn
            if conn is None:
                raise StoreUnavailable("Database is not initialized")
            try:
                yield conn
                conn.commit()
            except sqlite3.IntegrityError as exc:
                conn.rollback()
                logger.warning("Constraint violation: %s", exc)
                raise ConstraintViolation(str(exc)) from exc
            except sqlite3.Error as exc:
                _safe_rollback(conn)
                logger.warning("Database error: %s", exc)
                raise StoreIO(str(exc)) from exc
            except BaseException:
                conn.rollback()
                raise


def _safe_rollback(conn: sqlite3.Connection) -> None:
    """Roll back, ignoring failures from a connection that is already broken."""
    try:
        conn.rollback()
    except sqlite3.Error:
        logger.debug("Rollback failed after database error", exc_info=True)
