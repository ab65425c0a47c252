"""Morse transcoding endpoints. No authentication required."""

from __future__ import annotations

from fastapi import APIRouter

from morse_messenger.core import morse
from morse_messenger.schemas.morse import (
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    MorseTableEntry,
)

router = APIRouter(prefix="/morse", tags=["morse"])


@router.post("/encode", response_model=EncodeResponse)
def encode_text(payload: EncodeRequest) -> EncodeResponse:
    return EncodeResponse(morse=morse.encode(payload.text))


@router.post("/decode", response_model=DecodeResponse)
def decode_pattern(payload: DecodeRequest) -> DecodeResponse:
    return DecodeResponse(text=morse.decode(payload.morse))


@router.get("/table", response_model=list[MorseTableEntry])
def morse_table() -> list[MorseTableEntry]:
    """Reference table for reading and writing Morse by hand."""
    return [MorseTableEntry(character=char, code=code) for char, code in morse.MORSE_TABLE]
