"""initial schema

Revision ID: 5a1c0e9d7b21
Revises:
Create Date: 2026-10-19 10:02:11.418530

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5a1c0e9d7b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ACTIVE_PAIR = sa.text("status != 'rejected'")


def upgrade() -> None:
    """Create account, chat_request and message tables."""
    op.create_table(
        "account",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "chat_request",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("requester_id", sa.Integer(), nullable=False),
        sa.Column("target_id", sa.Integer(), nullable=False),
        sa.Column("pair_low", sa.Integer(), nullable=False),
        sa.Column("pair_high", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("responded_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="ck_chat_request_status",
        ),
        sa.CheckConstraint("requester_id != target_id", name="ck_chat_request_not_self"),
        sa.CheckConstraint("pair_low < pair_high", name="ck_chat_request_pair_order"),
        sa.ForeignKeyConstraint(["requester_id"], ["account.id"]),
        sa.ForeignKeyConstraint(["target_id"], ["account.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_chat_request_active_pair",
        "chat_request",
        ["pair_low", "pair_high"],
        unique=True,
        sqlite_where=_ACTIVE_PAIR,
        postgresql_where=_ACTIVE_PAIR,
    )
    op.create_index("ix_chat_request_target_id", "chat_request", ["target_id"])
    op.create_index("ix_chat_request_requester_id", "chat_request", ["requester_id"])
    op.create_table(
        "message",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("sender_id", sa.Integer(), nullable=False),
        sa.Column("recipient_id", sa.Integer(), nullable=False),
        sa.Column("morse", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["sender_id"], ["account.id"]),
        sa.ForeignKeyConstraint(["recipient_id"], ["account.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_message_sender_recipient", "message", ["sender_id", "recipient_id"]
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index("ix_message_sender_recipient", table_name="message")
    op.drop_table("message")
    op.drop_index("ix_chat_request_requester_id", table_name="chat_request")
    op.drop_index("ix_chat_request_target_id", table_name="chat_request")
    op.drop_index("uq_chat_request_active_pair", table_name="chat_request")
    op.drop_table("chat_request")
    op.drop_table("account")
