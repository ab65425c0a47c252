# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from morse_messenger.api.v1.endpoints.auth import create_access_token
from morse_messenger.core.context import AccountContext
from morse_messenger.core.settings import Settings
from morse_messenger.db.session import Base
from morse_messenger.db.session import get_db as app_get_session
from morse_messenger.main import app as fastapi_app
from morse_messenger.models import Account
from morse_messenger.services.accounts import register_account

TEST_DB_URL = "sqlite://"
DEFAULT_PASSWORD = "correct horse"

_TEST_SETTINGS_INSTANCE = Settings()


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    # A fresh in-memory database per test keeps autoincrement ids predictable:
    # the first account created is always the privileged account (id 1).
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Provide a Settings instance aligned with runtime configuration."""
    return _TEST_SETTINGS_INSTANCE


@pytest.fixture()
def make_account(db_session: Session) -> Callable[..., Account]:
    """Return a factory that registers accounts through the service layer."""

    def _make(name: str, password: str = DEFAULT_PASSWORD) -> Account:
        return register_account(db_session, name, password)

    return _make


@pytest.fixture()
def admin(make_account: Callable[..., Account]) -> Account:
    """The first registered account, which is the privileged one."""
    account = make_account("admin")
    assert account.id == 1
    return account


@pytest.fixture()
def alice(admin: Account, make_account: Callable[..., Account]) -> Account:
    return make_account("alice")


@pytest.fixture()
def bob(alice: Account, make_account: Callable[..., Account]) -> Account:
    return make_account("bob")


@pytest.fixture()
def carol(bob: Account, make_account: Callable[..., Account]) -> Account:
    return make_account("carol")


def context_for(account: Account) -> AccountContext:
    return AccountContext(account_id=account.id, name=account.name)


def auth_headers(account: Account) -> dict[str, str]:
    """Return bearer headers for ``account``."""
    token = create_access_token(account.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers(admin: Account) -> dict[str, str]:
    return auth_headers(admin)


@pytest.fixture()
def alice_headers(alice: Account) -> dict[str, str]:
    return auth_headers(alice)


@pytest.fixture()
def bob_headers(bob: Account) -> dict[str, str]:
    return auth_headers(bob)


@pytest.fixture()
def carol_headers(carol: Account) -> dict[str, str]:
    return auth_headers(carol)
