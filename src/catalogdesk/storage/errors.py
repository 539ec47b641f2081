"""Store error taxonomy surfaced to callers of the access operations."""

from __future__ import annotations


class StoreError(Exception):
    """Base class for all storage failures. ``str(exc)`` is the caller-facing message."""


class StoreUnavailable(StoreError):
    """The handle is not initialized, was closed, or the database could not be opened."""


class ConstraintViolation(StoreError):
    """A write was rejected by a table constraint."""


class DuplicateEmail(ConstraintViolation):
    """A user with this email is already registered."""


class StoreIO(StoreError):
    """Any other failure reading from or writing to the database."""
