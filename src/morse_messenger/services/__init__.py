"""Business logic services for the Morse Messenger application."""

from .access_policy import AccessPolicy, ChatRequestLookup, SqlChatRequestLookup, get_access_policy

__all__ = [
    "AccessPolicy",
    "ChatRequestLookup",
    "SqlChatRequestLookup",
    "get_access_policy",
]
