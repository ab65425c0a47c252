"""SQLAlchemy model for registered accounts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from morse_messenger.core.settings import settings
from morse_messenger.db.session import Base
from morse_messenger.db.time import utcnow

NAME_MAX_LENGTH = 64


class Account(Base):
    """A named account able to send chat requests and messages."""

    __tablename__ = "account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow, nullable=False)

    @property
    def is_privileged(self) -> bool:
        """Return True if this account bypasses chat-request gating."""
        return self.id == settings.privileged_account_id
