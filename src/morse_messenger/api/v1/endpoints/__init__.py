# src/morse_messenger/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .accounts import router as accounts_router
from .auth import router as auth_router
from .chat_requests import router as chat_requests_router
from .messages import router as messages_router
from .morse import router as morse_router

__all__ = [
    "auth_router",
    "accounts_router",
    "chat_requests_router",
    "messages_router",
    "morse_router",
]
