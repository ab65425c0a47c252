"""Models describing Morse-encoded messages between accounts."""

from datetime import datetime

from sqlalchemy import ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from morse_messenger.core import morse as morse_codec
from morse_messenger.db.session import Base
from morse_messenger.db.time import utcnow


class Message(Base):
    """Message exchanged between two accounts.

    Only the signal pattern is stored; plaintext is derived on read.
    """

    __tablename__ = "message"
    __table_args__ = (
        Index("ix_message_sender_recipient", "sender_id", "recipient_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sender_id: Mapped[int] = mapped_column(ForeignKey("account.id"), nullable=False)
    recipient_id: Mapped[int] = mapped_column(ForeignKey("account.id"), nullable=False)
    morse: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow, nullable=False)

    @property
    def text(self) -> str:
        """Return the body decoded with the Morse table."""
        return morse_codec.decode(self.morse)
