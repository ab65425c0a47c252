"""Message-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from morse_messenger.core import morse as morse_codec


class MessageCreate(BaseModel):
    """Schema for sending a message.

    Exactly one of ``morse`` (dits, dahs, spaces and ``/``) or ``text``
    (encoded server-side) must be given.
    """

    recipient_id: int = Field(..., ge=1)
    morse: str | None = Field(None, description="Morse body, letters separated by spaces, words by /")
    text: str | None = Field(None, description="Plain text to encode before storing")

    @field_validator("morse")
    @classmethod
    def check_signal_pattern(cls, v: str | None) -> str | None:
        # "?" stays allowed: it is what encoding emits for unsupported characters.
        if v is not None and not morse_codec.is_signal_pattern(v):
            raise ValueError("Morse body may only contain '.', '-', '/', '?' and spaces")
        return v

    @model_validator(mode="after")
    def check_single_body(self) -> "MessageCreate":
        if (self.morse is None) == (self.text is None):
            raise ValueError("Provide exactly one of 'morse' or 'text'")
        return self


class MessageResponse(BaseModel):
    """Stored message with its decoded text."""

    id: int
    sender_id: int
    recipient_id: int
    morse: str
    text: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
