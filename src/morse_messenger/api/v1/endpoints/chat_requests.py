"""Chat request endpoints for the Morse Messenger API."""

from __future__ import annotations

from fastapi import APIRouter, status

from morse_messenger.schemas.chat_request import (
    ChatRequestCreate,
    ChatRequestDecision,
    ChatRequestResponse,
)
from morse_messenger.services import chat_requests as chat_request_service

from ..dependencies import AccountContextDep, SessionDep

router = APIRouter(prefix="/chat-requests", tags=["chat requests"])


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=ChatRequestResponse)
def send_chat_request(
    payload: ChatRequestCreate,
    context: AccountContextDep,
    db: SessionDep,
) -> ChatRequestResponse:
    """Ask another account to open a chat."""
    chat_request = chat_request_service.create_chat_request(db, context, payload.target_id)
    return ChatRequestResponse.model_validate(chat_request)


@router.post("/{request_id}/respond", response_model=ChatRequestResponse)
def respond_to_chat_request(
    request_id: int,
    payload: ChatRequestDecision,
    context: AccountContextDep,
    db: SessionDep,
) -> ChatRequestResponse:
    """Accept or reject a pending request addressed to the caller."""
    chat_request = chat_request_service.respond_to_chat_request(
        db, context, request_id, payload.decision
    )
    return ChatRequestResponse.model_validate(chat_request)


@router.get("/incoming", response_model=list[ChatRequestResponse])
def list_incoming(context: AccountContextDep, db: SessionDep) -> list[ChatRequestResponse]:
    """Requests other accounts sent to the caller, newest first."""
    requests = chat_request_service.list_incoming_requests(db, context)
    return [ChatRequestResponse.model_validate(item) for item in requests]


@router.get("/outgoing", response_model=list[ChatRequestResponse])
def list_outgoing(context: AccountContextDep, db: SessionDep) -> list[ChatRequestResponse]:
    """Requests the caller sent, newest first."""
    requests = chat_request_service.list_outgoing_requests(db, context)
    return [ChatRequestResponse.model_validate(item) for item in requests]
