"""Chat request Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatRequestCreate(BaseModel):
    """Schema for asking another account to chat."""

    target_id: int = Field(..., ge=1, description="Account to open a chat with")


class ChatRequestDecision(BaseModel):
    """Schema for answering a pending chat request."""

    decision: Literal["accept", "reject"]


class ChatRequestResponse(BaseModel):
    """Chat request information returned by the API."""

    id: int
    requester_id: int
    requester_name: str
    target_id: int
    target_name: str
    status: Literal["pending", "accepted", "rejected"]
    created_at: datetime
    responded_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
