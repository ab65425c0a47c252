"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .account import AccountResponse, LoginRequest, LoginResponse, RegisterRequest
from .chat_request import ChatRequestCreate, ChatRequestDecision, ChatRequestResponse
from .message import MessageCreate, MessageResponse
from .morse import DecodeRequest, DecodeResponse, EncodeRequest, EncodeResponse, MorseTableEntry

__all__ = [
    "AccountResponse", "LoginRequest", "LoginResponse", "RegisterRequest",
    "ChatRequestCreate", "ChatRequestDecision", "ChatRequestResponse",
    "MessageCreate", "MessageResponse",
    "DecodeRequest", "DecodeResponse", "EncodeRequest", "EncodeResponse", "MorseTableEntry",
]
