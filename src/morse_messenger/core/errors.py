"""Domain errors surfaced to API callers.

Every error is terminal for the operation that raised it: the session is
rolled back and nothing is retried. The API layer renders these as
``{"detail": ..., "code": ...}`` with the class's HTTP status.
"""

from __future__ import annotations

from typing import ClassVar


class MessengerError(RuntimeError):
    """Base exception for all Morse Messenger domain failures."""

    code: ClassVar[str] = "messenger_error"
    status_code: ClassVar[int] = 400
    default_detail: ClassVar[str] = "Operation failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class DuplicateNameError(MessengerError):
    """Raised when registering a name that is already taken."""

    code = "duplicate_name"
    status_code = 409
    default_detail = "Account name is already taken"


class InvalidCredentialsError(MessengerError):
    """Raised when a login name/password pair does not match."""

    code = "invalid_credentials"
    status_code = 401
    default_detail = "Invalid name or password"


class AccountNotFoundError(MessengerError):
    code = "account_not_found"
    status_code = 404
    default_detail = "Account not found"


class SelfRequestForbiddenError(MessengerError):
    """Raised when an account sends a chat request to itself."""

    code = "self_request_forbidden"
    status_code = 400
    default_detail = "You cannot send a chat request to yourself"


class DuplicateRequestError(MessengerError):
    """Raised when an active chat request already exists for the pair."""

    code = "duplicate_request"
    status_code = 409
    default_detail = "A chat request already exists for these accounts"


class ChatRequestNotFoundError(MessengerError):
    code = "chat_request_not_found"
    status_code = 404
    default_detail = "Chat request not found"


class NotRequestTargetError(MessengerError):
    """Raised when someone other than the target responds to a request."""

    code = "not_request_target"
    status_code = 403
    default_detail = "Only the recipient of a chat request may respond to it"


class RequestNotPendingError(MessengerError):
    """Raised when responding to a request that was already resolved."""

    code = "request_not_pending"
    status_code = 409
    default_detail = "Chat request has already been answered"


class SelfMessageForbiddenError(MessengerError):
    code = "self_message_forbidden"
    status_code = 400
    default_detail = "You cannot send a message to yourself"


class ChatNotAuthorizedError(MessengerError):
    """Raised when no accepted chat request covers the sender/recipient pair."""

    code = "chat_not_authorized"
    status_code = 403
    default_detail = "Chat has not been accepted"


class EmptyMessageError(MessengerError):
    code = "empty_message"
    status_code = 400
    default_detail = "Message is empty"
