"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from morse_messenger.core.context import AccountContext
from morse_messenger.core.settings import settings
from morse_messenger.db.session import get_db
from morse_messenger.models import Account

# HTTP Bearer scheme for JWT authentication
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _decode_account_id(subject: str) -> int:
    """Decode the JWT subject into an account id.

    Raises:
        HTTPException: If the subject is not a positive integer
    """
    try:
        account_id = int(subject)
    except (TypeError, ValueError) as err:
        raise _credentials_error() from err
    if account_id < 1:
        raise _credentials_error()
    return account_id


def get_current_account(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    db: SessionDep,
) -> Account:
    """Get the current authenticated account from a JWT token.

    Args:
        credentials: HTTP Bearer token credentials
        db: Database session

    Returns:
        Account object for the authenticated caller

    Raises:
        HTTPException: If token is invalid or the account no longer exists
    """
    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise _credentials_error() from err

    subject = payload.get("sub")
    if subject is None:
        raise _credentials_error()
    account_id = _decode_account_id(subject)

    account = db.get(Account, account_id)
    if account is None:
        raise _credentials_error("Account not found")
    return account


# Type alias for current account dependency
CurrentAccountDep = Annotated[Account, Depends(get_current_account)]


def get_account_context(account: CurrentAccountDep) -> AccountContext:
    """Return the explicit caller context handed to service functions."""
    return AccountContext(account_id=account.id, name=account.name)


AccountContextDep = Annotated[AccountContext, Depends(get_account_context)]
