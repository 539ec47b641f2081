"""Per-user product catalog.

Update and delete are owner-scoped: the row must match both the product id
and the owner's email. A mismatch changes nothing and raises no error; the
returned row count is the only signal.
"""

from __future__ import annotations

import logging

from catalogdesk.storage.connection import StoreHandle
from catalogdesk.storage.models import Product

logger = logging.getLogger(__name__)

_PRODUCT_COLUMNS = "id, name, price, description, category, owner_email"


def add_product(
    store: StoreHandle,
    name: str,
    price: float,
    description: str,
    category: str,
    owner_email: str,
) -> int:
    """Insert a product and return its new id."""
    with store.connection() as conn:
        cur = conn.execute(
            "INSERT INTO products (name, price, description, category, owner_email) "
            "VALUES (?, ?, ?, ?, ?)",
            (name, price, description, category, owner_email),
        )
        product_id = cur.lastrowid
    logger.debug("Added product %s for %s", product_id, owner_email)
    return product_id


def get_products(store: StoreHandle) -> list[Product]:
    """Return every product across all owners, in store order."""
    with store.connection() as conn:
        rows = conn.execute(f"SELECT {_PRODUCT_COLUMNS} FROM products").fetchall()  # noqa: S608
    return [Product.from_row(r) for r in rows]


def get_user_products(store: StoreHandle, owner_email: str) -> list[Product]:
    with store.connection() as conn:
        rows = conn.execute(
            f"SELECT {_PRODUCT_COLUMNS} FROM products WHERE owner_email = ?",  # noqa: S608
            (owner_email,),
        ).fetchall()
    return [Product.from_row(r) for r in rows]


def update_product(
    store: StoreHandle,
    product_id: int,
    name: str,
    price: float,
    description: str,
    category: str,
    owner_email: str,
) -> int:
    """Update an owned product's fields. Returns the number of rows changed (0 or 1)."""
    with store.connection() as conn:
        cur = conn.execute(
            "UPDATE products SET name = ?, price = ?, description = ?, category = ? "
            "WHERE id = ? AND owner_email = ?",
            (name, price, description, category, product_id, owner_email),
        )
        affected = cur.rowcount
    if not affected:
        logger.info("Update matched no product %s owned by %s", product_id, owner_email)
    return affected


def delete_product(store: StoreHandle, product_id: int, owner_email: str) -> int:
    """Delete an owned product. Returns the number of rows removed (0 or 1)."""
    with store.connection() as conn:
        cur = conn.execute(
            "DELETE FROM products WHERE id = ? AND owner_email = ?",
            (product_id, owner_email),
        )
        affected = cur.rowcount
    if not affected:
        logger.info("Delete matched no product %s owned by %s", product_id, owner_email)
    return affected
