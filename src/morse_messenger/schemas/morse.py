"""Morse codec Pydantic schemas."""

from pydantic import BaseModel, Field


class EncodeRequest(BaseModel):
    text: str = Field(..., description="Text to encode; case is ignored")


class EncodeResponse(BaseModel):
    morse: str


class DecodeRequest(BaseModel):
    morse: str = Field(..., description="Whitespace-separated codes, '/' between words")


class DecodeResponse(BaseModel):
    text: str


class MorseTableEntry(BaseModel):
    """One row of the reference table."""

    character: str
    code: str
