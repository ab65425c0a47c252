"""Chat request lifecycle: pending -> accepted | rejected.

A request is created by its requester and answered only by its target. Both
answers are terminal. Pair uniqueness covers *active* requests (pending or
accepted); once a request is rejected either account may ask again, which
creates a new request with a new id.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Literal

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from morse_messenger.core.context import AccountContext
from morse_messenger.core.errors import (
    AccountNotFoundError,
    ChatRequestNotFoundError,
    DuplicateRequestError,
    NotRequestTargetError,
    RequestNotPendingError,
    SelfRequestForbiddenError,
)
from morse_messenger.db.time import utcnow
from morse_messenger.models import Account, ChatRequest, ChatRequestStatus

__all__ = [
    "Decision",
    "create_chat_request",
    "respond_to_chat_request",
    "list_incoming_requests",
    "list_outgoing_requests",
]

logger = logging.getLogger(__name__)

Decision = Literal["accept", "reject"]

_DECISION_STATUS: dict[str, ChatRequestStatus] = {
    "accept": ChatRequestStatus.ACCEPTED,
    "reject": ChatRequestStatus.REJECTED,
}


def _active_request_exists(db: Session, first_id: int, second_id: int) -> bool:
    pair_low, pair_high = ChatRequest.pair_key(first_id, second_id)
    stmt = (
        select(ChatRequest.id)
        .where(
            ChatRequest.pair_low == pair_low,
            ChatRequest.pair_high == pair_high,
            ChatRequest.status != ChatRequestStatus.REJECTED.value,
        )
        .limit(1)
    )
    return db.execute(stmt).first() is not None


def create_chat_request(db: Session, context: AccountContext, target_id: int) -> ChatRequest:
    """Open a pending chat request from the caller to ``target_id``.

    Raises:
        SelfRequestForbiddenError: If the caller targets itself.
        AccountNotFoundError: If the target account does not exist.
        DuplicateRequestError: If an active request already covers the pair.
    """
    requester_id = context.account_id
    if requester_id == target_id:
        raise SelfRequestForbiddenError()

    if db.get(Account, target_id) is None:
        raise AccountNotFoundError()

    if _active_request_exists(db, requester_id, target_id):
        raise DuplicateRequestError()

    pair_low, pair_high = ChatRequest.pair_key(requester_id, target_id)
    chat_request = ChatRequest(
        requester_id=requester_id,
        target_id=target_id,
        pair_low=pair_low,
        pair_high=pair_high,
        status=ChatRequestStatus.PENDING.value,
    )
    db.add(chat_request)
    try:
        db.commit()
    except IntegrityError as err:
        # A concurrent request for the same pair won the unique index.
        db.rollback()
        raise DuplicateRequestError() from err
    db.refresh(chat_request)

    logger.info(
        "Chat request %d created: %d -> %d", chat_request.id, requester_id, target_id
    )
    return chat_request


def respond_to_chat_request(
    db: Session,
    context: AccountContext,
    request_id: int,
    decision: Decision,
) -> ChatRequest:
    """Accept or reject a pending request addressed to the caller.

    The transition is a single conditional update scoped by id, target and
    pending status, so concurrent answers cannot both apply.

    Raises:
        ChatRequestNotFoundError: If no request has ``request_id``.
        NotRequestTargetError: If the caller is not the request's target.
        RequestNotPendingError: If the request was already answered.
    """
    try:
        new_status = _DECISION_STATUS[decision]
    except KeyError as err:
        raise ValueError(f"Unknown decision {decision!r}") from err

    result = db.execute(
        update(ChatRequest)
        .where(
            ChatRequest.id == request_id,
            ChatRequest.target_id == context.account_id,
            ChatRequest.status == ChatRequestStatus.PENDING.value,
        )
        .values(status=new_status.value, responded_at=utcnow())
    )

    if result.rowcount == 0:
        db.rollback()
        chat_request = db.get(ChatRequest, request_id)
        if chat_request is None:
            raise ChatRequestNotFoundError()
        if chat_request.target_id != context.account_id:
            logger.warning(
                "Account %d tried to answer chat request %d addressed to %d",
                context.account_id,
                request_id,
                chat_request.target_id,
            )
            raise NotRequestTargetError()
        raise RequestNotPendingError()

    db.commit()
    chat_request = db.get_one(ChatRequest, request_id)

    logger.info(
        "Chat request %d %s by account %d", request_id, new_status.value, context.account_id
    )
    return chat_request


def list_incoming_requests(db: Session, context: AccountContext) -> Sequence[ChatRequest]:
    """Return requests addressed to the caller, newest first."""
    stmt = (
        select(ChatRequest)
        .options(selectinload(ChatRequest.requester), selectinload(ChatRequest.target))
        .where(ChatRequest.target_id == context.account_id)
        .order_by(ChatRequest.created_at.desc(), ChatRequest.id.desc())
    )
    return db.scalars(stmt).all()


def list_outgoing_requests(db: Session, context: AccountContext) -> Sequence[ChatRequest]:
    """Return requests sent by the caller, newest first."""
    stmt = (
        select(ChatRequest)
        .options(selectinload(ChatRequest.requester), selectinload(ChatRequest.target))
        .where(ChatRequest.requester_id == context.account_id)
        .order_by(ChatRequest.created_at.desc(), ChatRequest.id.desc())
    )
    return db.scalars(stmt).all()

