"""
Single-use tokens for email verification and password reset.

A token starts with `is_used = false` and is flipped (with `used_at`) at most once.
"""
from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    false,
)

from migrations.helpers import create_table, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "email_verification_tokens",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("token", String(255), nullable=False, unique=True),
        Column("user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False),
        Column(
            "type",
            Enum("email_verification", "password_reset", name="email_verification_token_type"),
            server_default="email_verification",
        ),
        Column("is_used", Boolean, server_default=false()),
        Column("expires_at", DateTime(timezone=True), nullable=False),
        Column("used_at", DateTime(timezone=True), nullable=True),
        Column("ip_address", String(45), nullable=True),
        Column("user_agent", String(500), nullable=True),
        *timestamps(),
        Index("idx_email_verification_tokens_token", "token"),
        Index("idx_email_verification_tokens_user_id", "user_id"),
        Index("idx_email_verification_tokens_type", "type"),
        Index("idx_email_verification_tokens_expires_at", "expires_at"),
        Index("idx_email_verification_tokens_is_used", "is_used"),
        Index("idx_email_verification_tokens_created_at", "created_at"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("users",))


def down(conn) -> None:
    drop_table(conn, _table)
