# src/morse_messenger/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    accounts_router,
    auth_router,
    chat_requests_router,
    messages_router,
    morse_router,
)

__all__ = [
    "auth_router",
    "accounts_router",
    "chat_requests_router",
    "messages_router",
    "morse_router",
]
