"""Account registration, credential checks and lookups."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from morse_messenger.core import security
from morse_messenger.core.errors import (
    AccountNotFoundError,
    DuplicateNameError,
    InvalidCredentialsError,
)
from morse_messenger.models import Account

__all__ = [
    "get_account",
    "get_account_by_name",
    "list_accounts",
    "register_account",
    "authenticate",
]

logger = logging.getLogger(__name__)


def get_account(db: Session, account_id: int) -> Account:
    """Return the account with ``account_id`` or raise AccountNotFoundError."""
    account = db.get(Account, account_id)
    if account is None:
        raise AccountNotFoundError()
    return account


def get_account_by_name(db: Session, name: str) -> Account | None:
    """Return the account named exactly ``name`` (case-sensitive)."""
    return db.scalars(select(Account).where(Account.name == name)).first()


def list_accounts(db: Session, exclude_id: int | None = None) -> Sequence[Account]:
    """Return all accounts ordered by name, optionally without one of them."""
    stmt = select(Account).order_by(Account.name)
    if exclude_id is not None:
        stmt = stmt.where(Account.id != exclude_id)
    return db.scalars(stmt).all()


def register_account(db: Session, name: str, password: str) -> Account:
    """Persist a new account with a hashed password.

    Args:
        db: Database session
        name: Display name, already trimmed; unique and case-sensitive
        password: Plaintext password, never stored

    Returns:
        The created account

    Raises:
        DuplicateNameError: If the name is already registered
    """
    if get_account_by_name(db, name) is not None:
        raise DuplicateNameError()

    account = Account(name=name, password_hash=security.hash_password(password))
    db.add(account)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise DuplicateNameError() from err
    db.refresh(account)

    logger.info("Registered account %d (%s)", account.id, account.name)
    return account


def authenticate(db: Session, name: str, password: str) -> Account:
    """Return the account matching ``name`` and ``password``.

    Raises:
        InvalidCredentialsError: If the name is unknown or the password is wrong
    """
    account = get_account_by_name(db, name)
    if account is None or not security.verify_password(password, account.password_hash):
        logger.info("Failed login attempt for name %r", name)
        raise InvalidCredentialsError()
    return account
