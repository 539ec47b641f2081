"""User registration, lookup, and sign-in."""

from __future__ import annotations

import logging

from catalogdesk.storage.connection import StoreHandle
from catalogdesk.storage.errors import ConstraintViolation, DuplicateEmail
from catalogdesk.storage.models import User
from catalogdesk.storage.session import write_session

logger = logging.getLogger(__name__)


def create_user(store: StoreHandle, email: str, password: str) -> None:
    """Register a new user.

    The password is stored as given. Raises DuplicateEmail when the email is
    already registered; the existing row is left untouched.
    """
    try:
        with store.connection() as conn:
            conn.execute(
                "INSERT INTO users (email, password) VALUES (?, ?)",
                (email, password),
            )
    except ConstraintViolation as exc:
        if "UNIQUE" in str(exc) and "users.email" in str(exc):
            raise DuplicateEmail(f"User already exists: {email}") from exc
        raise
    logger.debug("Created user %s", email)


def get_user(store: StoreHandle, email: str) -> User | None:
    """Look up a user by exact (case-sensitive) email. Returns None if absent."""
    with store.connection() as conn:
        row = conn.execute(
            "SELECT id, email, password FROM users WHERE email = ?", (email,)
        ).fetchone()
    return User.from_row(row) if row else None


def sign_in(store: StoreHandle, email: str, password: str) -> bool:
    """Check credentials and make ``email`` the current user on success.

    Returns False, leaving the session unchanged, when the email is unknown
    or the password does not match.
    """
    with store.connection() as conn:
        row = conn.execute(
            "SELECT password FROM users WHERE email = ?", (email,)
        ).fetchone()
        if row is None or row["password"] != password:
            logger.info("Sign-in rejected for %s", email)
            return False
        write_session(conn, email)
    logger.info("Signed in %s", email)
    return True
