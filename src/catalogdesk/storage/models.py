"""Row records returned by the access operations."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: int | None
    email: str
    password: str

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> User:
        return cls(id=row["id"], email=row["email"], password=row["password"])


@dataclass(frozen=True)
class Product:
    id: int | None
    name: str
    price: float
    description: str
    category: str
    owner_email: str

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> Product:
        return cls(
            id=row["id"],
            name=row["name"],
            price=row["price"],
            description=row["description"],
            category=row["category"],
            owner_email=row["owner_email"],
        )
