"""Database schema definition."""

from __future__ import annotations

import sqlite3

_SCHEMA_SQL = """\
-- Registered accounts; password is stored verbatim
CREATE TABLE IF NOT EXISTS users (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    email       TEXT UNIQUE NOT NULL,
    password    TEXT NOT NULL
);

-- Currently signed-in user, zero or one row
CREATE TABLE IF NOT EXISTS session (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    email       TEXT
);

-- Per-user product catalog, owned by users.email value
CREATE TABLE IF NOT EXISTS products (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT NOT NULL,
    price       REAL NOT NULL,
    description TEXT NOT NULL,
    category    TEXT NOT NULL,
    owner_email TEXT NOT NULL
);
"""

TABLES = ("users", "session", "products")


def create_schema(conn: sqlite3.Connection) -> None:
    """Create all tables if they do not already exist."""
    conn.executescript(_SCHEMA_SQL)
