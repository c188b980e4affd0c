"""Auth API — professor login, student registration, user directory."""
from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from projtrack.api.serializers import serialize_interest, serialize_user
from projtrack.container import get_store
from projtrack.core.security import create_token, decode_token
from projtrack.domain.errors import AuthenticationError, NotFoundError, ValidationError
from projtrack.domain.schemas import LoginRequest, RegisterStudentRequest
from projtrack.persistence.interfaces.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])

_bearer = HTTPBearer(auto_error=False)


# ------------------------------------------------------------------
# Dependency: caller identity from Bearer token
# ------------------------------------------------------------------
def get_current_user(credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer)) -> dict:
    if not credentials:
        raise AuthenticationError("Not authenticated")
    return decode_token(credentials.credentials)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------
@router.post("/auth/login")
def login(body: LoginRequest, store: Storage = Depends(get_store)):
    missing = [
        {"field": name, "message": "Field required"}
        for name in ("username", "password")
        if not getattr(body, name)
    ]
    if missing:
        raise ValidationError("Username and password are required", errors=missing)

    result = store.authenticate_user(body.username, body.password)
    if not result.is_success:
        logger.warning("Failed login for username %r", body.username)
        raise AuthenticationError(result.error)

    user = result.value
    return {
        "user": serialize_user(user),
        "token": create_token(user.id, user.username, user.type),
    }


@router.post("/auth/register", status_code=status.HTTP_201_CREATED)
def register(body: RegisterStudentRequest, store: Storage = Depends(get_store)):
    # ConflictError from the store maps to 409
    user = store.create_user(body.to_insert())
    logger.info("Registered student %s", user.id)
    return {"user": serialize_user(user)}


@router.get("/auth/me")
def me(current_user: dict = Depends(get_current_user), store: Storage = Depends(get_store)):
    user = store.get_user(current_user["sub"])
    if not user:
        raise NotFoundError("User not found")
    return {"user": serialize_user(user)}


# ------------------------------------------------------------------
# Users
# ------------------------------------------------------------------
@router.get("/users")
def list_users(store: Storage = Depends(get_store)):
    return [serialize_user(u) for u in store.get_users()]


@router.get("/users/{user_id}")
def get_user(user_id: str, store: Storage = Depends(get_store)):
    user = store.get_user(user_id)
    if not user:
        raise NotFoundError("User not found")
    return serialize_user(user)


@router.get("/users/{user_id}/interests")
def list_user_interests(user_id: str, store: Storage = Depends(get_store)):
    return [serialize_interest(i) for i in store.get_user_interests(user_id)]
