"""Message endpoints for the Morse Messenger API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status

from morse_messenger.schemas.message import MessageCreate, MessageResponse
from morse_messenger.services import messages as message_service

from ..dependencies import AccountContextDep, SessionDep

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("/", status_code=status.HTTP_201_CREATED)
def send_message(
    message_data: MessageCreate,
    context: AccountContextDep,
    db: SessionDep,
) -> dict[str, Any]:
    """Send a Morse message; requires an accepted chat unless privileged."""
    message = message_service.send_message(
        db,
        context,
        message_data.recipient_id,
        morse_body=message_data.morse,
        text=message_data.text,
    )
    return {
        "status": "message_sent",
        "message": MessageResponse.model_validate(message).model_dump(mode="json"),
    }


@router.get("/with/{account_id}", response_model=list[MessageResponse])
def list_conversation(
    account_id: int,
    context: AccountContextDep,
    db: SessionDep,
) -> list[MessageResponse]:
    """Return the conversation with another account, oldest first."""
    messages = message_service.list_messages(db, context, account_id)
    return [MessageResponse.model_validate(message) for message in messages]
