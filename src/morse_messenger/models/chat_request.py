"""Models describing chat requests between two accounts."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from morse_messenger.db.session import Base
from morse_messenger.db.time import utcnow

if TYPE_CHECKING:
    from .account import Account


class ChatRequestStatus(str, Enum):
    """Lifecycle states of a chat request.

    ``pending`` is the only non-terminal state.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ChatRequest(Base):
    """Request from one account to open a chat with another.

    The unordered pair is kept in ``pair_low``/``pair_high`` so the store can
    enforce that at most one non-rejected request exists per pair, whichever
    side sent it.
    """

    __tablename__ = "chat_request"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="ck_chat_request_status",
        ),
        CheckConstraint("requester_id != target_id", name="ck_chat_request_not_self"),
        CheckConstraint("pair_low < pair_high", name="ck_chat_request_pair_order"),
        Index(
            "uq_chat_request_active_pair",
            "pair_low",
            "pair_high",
            unique=True,
            sqlite_where=text("status != 'rejected'"),
            postgresql_where=text("status != 'rejected'"),
        ),
        Index("ix_chat_request_target_id", "target_id"),
        Index("ix_chat_request_requester_id", "requester_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    requester_id: Mapped[int] = mapped_column(ForeignKey("account.id"), nullable=False)
    target_id: Mapped[int] = mapped_column(ForeignKey("account.id"), nullable=False)
    pair_low: Mapped[int] = mapped_column(Integer, nullable=False)
    pair_high: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=ChatRequestStatus.PENDING.value,
    )
    created_at: Mapped[datetime] = mapped_column(default=utcnow, nullable=False)
    responded_at: Mapped[datetime | None] = mapped_column(nullable=True)

    requester: Mapped[Account] = relationship("Account", foreign_keys=[requester_id])
    target: Mapped[Account] = relationship("Account", foreign_keys=[target_id])

    @property
    def requester_name(self) -> str:
        return self.requester.name

    @property
    def target_name(self) -> str:
        return self.target.name

    @staticmethod
    def pair_key(first_id: int, second_id: int) -> tuple[int, int]:
        """Return the normalized (low, high) key for an unordered pair."""
        return (first_id, second_id) if first_id < second_id else (second_id, first_id)
