"""Storage layer — SQLite store handle and access operations."""

from catalogdesk.storage.connection import StoreHandle
from catalogdesk.storage.errors import (
    ConstraintViolation,
    DuplicateEmail,
    StoreError,
    StoreIO,
    StoreUnavailable,
)
from catalogdesk.storage.models import Product, User
from catalogdesk.storage.products import (
    add_product,
    delete_product,
    get_products,
    get_user_products,
    update_product,
)
from catalogdesk.storage.session import (
    clear_current_user,
    get_current_user,
    set_current_user,
)
from catalogdesk.storage.users import create_user, get_user, sign_in

__all__ = [
    "StoreHandle",
    "StoreError",
    "StoreUnavailable",
    "ConstraintViolation",
    "DuplicateEmail",
    "StoreIO",
    "User",
    "Product",
    "create_user",
    "get_user",
    "sign_in",
    "set_current_user",
    "get_current_user",
    "clear_current_user",
    "add_product",
    "get_products",
    "get_user_products",
    "update_product",
    "delete_product",
]
