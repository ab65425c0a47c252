"""Authorization gate deciding whether one account may message another."""

from __future__ import annotations

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from morse_messenger.core.settings import settings
from morse_messenger.models import ChatRequest, ChatRequestStatus


class ChatRequestLookup(Protocol):
    """Read capability over chat requests needed by the access policy."""

    def has_accepted_request(self, first_id: int, second_id: int) -> bool:
        """Return True if an accepted request exists for the unordered pair."""
        ...


class SqlChatRequestLookup:
    """Chat request lookup backed by the SQL store."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def has_accepted_request(self, first_id: int, second_id: int) -> bool:
        pair_low, pair_high = ChatRequest.pair_key(first_id, second_id)
        stmt = (
            select(ChatRequest.id)
            .where(
                ChatRequest.pair_low == pair_low,
                ChatRequest.pair_high == pair_high,
                ChatRequest.status == ChatRequestStatus.ACCEPTED.value,
            )
            .limit(1)
        )
        return self._db.execute(stmt).first() is not None


class AccessPolicy:
    """Decides whether a sender may message a recipient.

    The privileged account may message, and be messaged by, anyone. Every
    other pair needs an accepted chat request, sent by either side. Decisions
    read the lookup on every call and are never cached, since a request may be
    answered between two sends.

    Callers must reject ``sender_id == recipient_id`` before asking.
    """

    def __init__(self, privileged_account_id: int | None = None) -> None:
        self.privileged_account_id = (
            privileged_account_id
            if privileged_account_id is not None
            else settings.privileged_account_id
        )

    def is_privileged(self, account_id: int) -> bool:
        return account_id == self.privileged_account_id

    def can_send(
        self,
        sender_id: int,
        recipient_id: int,
        request_lookup: ChatRequestLookup,
    ) -> bool:
        """Return True if ``sender_id`` may send a message to ``recipient_id``."""
        if self.is_privileged(sender_id) or self.is_privileged(recipient_id):
            return True
        return request_lookup.has_accepted_request(sender_id, recipient_id)


def get_access_policy() -> AccessPolicy:
    """Return an access policy bound to the configured privileged account."""
    return AccessPolicy()
