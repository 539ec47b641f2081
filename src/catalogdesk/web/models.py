"""Pydantic v2 request and response models for the command surface."""

from __future__ import annotations

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Common
# ---------------------------------------------------------------------------
class OkResponse(BaseModel):
    ok: bool


class ErrorResponse(BaseModel):
    error: str


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------
class CreateUserRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    id: int | None
    email: str
    password: str


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
class SignInRequest(BaseModel):
    email: str
    password: str


class SessionRequest(BaseModel):
    email: str


class CurrentUserResponse(BaseModel):
    email: str | None


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class ProductRequest(BaseModel):
    name: str
    price: float
    description: str
    category: str
    owner_email: str


class ProductResponse(ProductRequest):
    id: int | None


class ProductCreatedResponse(BaseModel):
    id: int


class AffectedResponse(BaseModel):
    affected: int
