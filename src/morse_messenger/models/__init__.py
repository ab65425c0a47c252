# src/morse_messenger/models/__init__.py
"""SQLAlchemy models for the Morse Messenger application."""

from .account import Account
from .chat_request import ChatRequest, ChatRequestStatus
from .message import Message

__all__ = [
    "Account",
    "ChatRequest", "ChatRequestStatus",
    "Message",
]
