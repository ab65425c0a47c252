"""Sending and reading Morse-encoded messages."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import and_, or_, select
from sqlalchemy.orm import Session

from morse_messenger.core import morse
from morse_messenger.core.context import AccountContext
from morse_messenger.core.errors import (
    ChatNotAuthorizedError,
    EmptyMessageError,
    SelfMessageForbiddenError,
)
from morse_messenger.models import Message
from morse_messenger.services.access_policy import (
    AccessPolicy,
    SqlChatRequestLookup,
    get_access_policy,
)
from morse_messenger.services.accounts import get_account

__all__ = ["send_message", "list_messages"]

logger = logging.getLogger(__name__)


def _resolve_body(morse_body: str | None, text: str | None) -> str:
    if morse_body is not None and text is not None:
        raise ValueError("Provide either a Morse body or text, not both")
    if morse_body is not None:
        if not morse.is_signal_pattern(morse_body):
            raise ValueError(
                "Morse body may only contain dots, dashes, slashes, question marks and spaces"
            )
        return morse_body.strip()
    if text is not None:
        return morse.encode(text).strip()
    return ""


def send_message(
    db: Session,
    context: AccountContext,
    recipient_id: int,
    *,
    morse_body: str | None = None,
    text: str | None = None,
    policy: AccessPolicy | None = None,
) -> Message:
    """Store a message from the caller to ``recipient_id``.

    The body is either a Morse pattern typed by the sender or plain text that
    is encoded here. Only the pattern is persisted.

    Raises:
        SelfMessageForbiddenError: If the caller messages itself.
        EmptyMessageError: If the encoded body is empty.
        AccountNotFoundError: If the recipient does not exist.
        ChatNotAuthorizedError: If the access policy refuses the pair.
        ValueError: If both bodies are given or the Morse body holds other characters.
    """
    sender_id = context.account_id
    if sender_id == recipient_id:
        raise SelfMessageForbiddenError()

    body = _resolve_body(morse_body, text)
    if not body:
        raise EmptyMessageError()

    get_account(db, recipient_id)

    policy = policy or get_access_policy()
    if not policy.can_send(sender_id, recipient_id, SqlChatRequestLookup(db)):
        logger.warning("Refused message %d -> %d: chat not accepted", sender_id, recipient_id)
        raise ChatNotAuthorizedError()

    message = Message(sender_id=sender_id, recipient_id=recipient_id, morse=body)
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def list_messages(
    db: Session,
    context: AccountContext,
    with_account_id: int,
) -> Sequence[Message]:
    """Return the conversation between the caller and another account.

    Messages in both directions are returned oldest first.

    Raises:
        AccountNotFoundError: If the other account does not exist.
    """
    get_account(db, with_account_id)

    me = context.account_id
    stmt = (
        select(Message)
        .where(
            or_(
                and_(Message.sender_id == me, Message.recipient_id == with_account_id),
                and_(Message.sender_id == with_account_id, Message.recipient_id == me),
            )
        )
        .order_by(Message.created_at, Message.id)
    )
    return db.scalars(stmt).all()
