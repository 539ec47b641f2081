"""FastAPI application factory for the catalogdesk command surface."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalogdesk.storage import (
    ConstraintViolation,
    StoreError,
    StoreHandle,
    StoreUnavailable,
)
from catalogdesk.web.routes import health_router, router

_STATUS_BY_ERROR = (
    (ConstraintViolation, 409),
    (StoreUnavailable, 503),
)


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Render a store failure as its message string."""
    status_code = next(
        (code for cls, code in _STATUS_BY_ERROR if isinstance(exc, cls)), 500
    )
    return JSONResponse({"error": str(exc)}, status_code=status_code)


def create_app(store: StoreHandle, lifespan=None) -> FastAPI:
    """Build and return a configured FastAPI application bound to ``store``."""
    app = FastAPI(title="catalogdesk", docs_url="/api/docs", lifespan=lifespan)
    app.state.store = store
    app.add_exception_handler(StoreError, _store_error_handler)
    app.include_router(health_router)
    app.include_router(router, prefix="/api/v1")
    return app
