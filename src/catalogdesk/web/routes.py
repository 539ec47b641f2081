"""Command route handlers. Each route runs exactly one store operation."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from catalogdesk.storage import (
    StoreError,
    StoreHandle,
    add_product,
    clear_current_user,
    create_user,
    delete_product,
    get_current_user,
    get_products,
    get_user,
    get_user_products,
    set_current_user,
    sign_in,
    update_product,
)
from catalogdesk.web.deps import get_store
from catalogdesk.web.models import (
    AffectedResponse,
    CreateUserRequest,
    CurrentUserResponse,
    OkResponse,
    ProductCreatedResponse,
    ProductRequest,
    ProductResponse,
    SessionRequest,
    SignInRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()
health_router = APIRouter()


@health_router.get("/health")
def health(store: StoreHandle = Depends(get_store)) -> JSONResponse:
    """Check database connectivity and return health status."""
    try:
        with store.connection() as conn:
            conn.execute("SELECT 1")
        return JSONResponse({"status": "healthy", "database": "ok"})
    except StoreError as exc:
        logger.warning("Health check failed: %s", exc)
        return JSONResponse(
            {"status": "unhealthy", "database": "error", "detail": str(exc)},
            status_code=503,
        )


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------
@router.post("/users", response_model=OkResponse, status_code=201)
def register(body: CreateUserRequest, store: StoreHandle = Depends(get_store)) -> OkResponse:
    create_user(store, body.email, body.password)
    return OkResponse(ok=True)


@router.get("/users/{email}", response_model=UserResponse | None)
def user_by_email(email: str, store: StoreHandle = Depends(get_store)) -> UserResponse | None:
    user = get_user(store, email)
    if user is None:
        return None
    return UserResponse(**asdict(user))


@router.get("/users/{email}/products", response_model=list[ProductResponse])
def products_for_user(email: str, store: StoreHandle = Depends(get_store)) -> list[ProductResponse]:
    return [ProductResponse(**asdict(p)) for p in get_user_products(store, email)]


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
@router.post("/session/sign-in", response_model=OkResponse)
def session_sign_in(body: SignInRequest, store: StoreHandle = Depends(get_store)) -> OkResponse:
    return OkResponse(ok=sign_in(store, body.email, body.password))


@router.put("/session", response_model=OkResponse)
def session_set(body: SessionRequest, store: StoreHandle = Depends(get_store)) -> OkResponse:
    set_current_user(store, body.email)
    return OkResponse(ok=True)


@router.get("/session", response_model=CurrentUserResponse)
def session_get(store: StoreHandle = Depends(get_store)) -> CurrentUserResponse:
    return CurrentUserResponse(email=get_current_user(store))


@router.delete("/session", response_model=OkResponse)
def session_clear(store: StoreHandle = Depends(get_store)) -> OkResponse:
    clear_current_user(store)
    return OkResponse(ok=True)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
@router.post("/products", response_model=ProductCreatedResponse, status_code=201)
def product_add(body: ProductRequest, store: StoreHandle = Depends(get_store)) -> ProductCreatedResponse:
    product_id = add_product(
        store, body.name, body.price, body.description, body.category, body.owner_email
    )
    return ProductCreatedResponse(id=product_id)


@router.get("/products", response_model=list[ProductResponse])
def product_list(store: StoreHandle = Depends(get_store)) -> list[ProductResponse]:
    return [ProductResponse(**asdict(p)) for p in get_products(store)]


@router.put("/products/{product_id}", response_model=AffectedResponse)
def product_update(
    product_id: int,
    body: ProductRequest,
    store: StoreHandle = Depends(get_store),
) -> AffectedResponse:
    affected = update_product(
        store,
        product_id,
        body.name,
        body.price,
        body.description,
        body.category,
        body.owner_email,
    )
    return AffectedResponse(affected=affected)


@router.delete("/products/{product_id}", response_model=AffectedResponse)
def product_delete(
    product_id: int,
    owner_email: str = Query(...),
    store: StoreHandle = Depends(get_store),
) -> AffectedResponse:
    return AffectedResponse(affected=delete_product(store, product_id, owner_email))
