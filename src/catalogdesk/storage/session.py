"""Single active session: the currently signed-in user."""

from __future__ import annotations

import logging
import sqlite3

from catalogdesk.storage.connection import StoreHandle

logger = logging.getLogger(__name__)


def write_session(conn: sqlite3.Connection, email: str) -> None:
    """Replace any existing session row with one for ``email``."""
    conn.execute("DELETE FROM session")
    conn.execute("INSERT INTO session (email) VALUES (?)", (email,))


def set_current_user(store: StoreHandle, email: str) -> None:
    with store.connection() as conn:
        write_session(conn, email)
    logger.debug("Session set for %s", email)


def get_current_user(store: StoreHandle) -> str | None:
    """Return the signed-in email, or None when nobody is signed in."""
    with store.connection() as conn:
        row = conn.execute("SELECT email FROM session LIMIT 1").fetchone()
    return row["email"] if row else None


def clear_current_user(store: StoreHandle) -> None:
    with store.connection() as conn:
        conn.execute("DELETE FROM session")
    logger.debug("Session cleared")
