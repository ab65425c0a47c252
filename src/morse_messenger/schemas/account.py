"""Account and authentication Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from morse_messenger.models.account import NAME_MAX_LENGTH


class RegisterRequest(BaseModel):
    """Schema for account registration."""

    name: str = Field(..., max_length=NAME_MAX_LENGTH, description="Unique, case-sensitive display name")
    password: str = Field(..., min_length=1, description="Plaintext password")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        """Trim surrounding whitespace before the length check and reject blank names."""
        if not isinstance(v, str):
            return v
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    name: str = Field(..., description="Registered account name")
    password: str = Field(..., description="Account password")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()


class LoginResponse(BaseModel):
    """Response returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(..., description="Token type (typically 'bearer')")
    account_id: int
    name: str


class AccountResponse(BaseModel):
    """Public account information."""

    id: int
    name: str
    is_privileged: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
