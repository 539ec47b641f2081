"""FastAPI dependencies for the command surface."""

from __future__ import annotations

from fastapi import Request

from catalogdesk.storage.connection import StoreHandle


def get_store(request: Request) -> StoreHandle:
    """Return the store handle injected into the application at startup."""
    return request.app.state.store
