# src/morse_messenger/api/v1/endpoints/auth.py
"""Authentication endpoints for the Morse Messenger API."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from fastapi import APIRouter, status
from jose import jwt

from morse_messenger.core.settings import settings
from morse_messenger.schemas.account import (
    AccountResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from morse_messenger.services import accounts as account_service

from ..dependencies import SessionDep

router = APIRouter(prefix="/auth", tags=["authentication"])


def create_access_token(account_id: int, extra_claims: dict[str, str] | None = None) -> str:
    """Create JWT access token for account authentication."""
    to_encode: dict[str, object] = {"sub": str(account_id)}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


@router.post(
    "/register",
    summary="Register a new account",
    status_code=status.HTTP_201_CREATED,
    response_model=AccountResponse,
)
def register(payload: RegisterRequest, db: SessionDep) -> AccountResponse:
    """Create an account; the name must not be taken yet."""
    account = account_service.register_account(db, payload.name, payload.password)
    return AccountResponse.model_validate(account)


@router.post(
    "/login",
    summary="Exchange name and password for an access token",
    response_model=LoginResponse,
)
def login(payload: LoginRequest, db: SessionDep) -> LoginResponse:
    """Authenticate with name and password."""
    account = account_service.authenticate(db, payload.name, payload.password)
    access_token = create_access_token(account.id, {"name": account.name})
    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        account_id=account.id,
        name=account.name,
    )
