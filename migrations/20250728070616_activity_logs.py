"""Append-only audit trail; `subject_type` / `subject_id` is a polymorphic reference."""
from __future__ import annotations

from sqlalchemy import (
    JSON,
    BigInteger,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

from migrations.helpers import create_table, drop_table


def _table(metadata: MetaData) -> Table:
    return Table(
        "activity_logs",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("user_id", BigInteger, ForeignKey("users.id", ondelete="SET NULL", onupdate="CASCADE"), nullable=True),
        Column("action", String(100), nullable=False),
        Column("subject_type", String(100), nullable=False),
        Column("subject_id", BigInteger, nullable=False),
        Column("description", Text, nullable=False),
        Column("old_values", JSON, nullable=True),
        Column("new_values", JSON, nullable=True),
        Column("ip_address", String(45), nullable=True),
        Column("user_agent", Text, nullable=True),
        Column("created_at", DateTime(timezone=True), nullable=False),
        Index("idx_activity_logs_user_id", "user_id"),
        Index("idx_activity_logs_action", "action"),
        Index("idx_activity_logs_subject", "subject_type", "subject_id"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("users",))


def down(conn) -> None:
    drop_table(conn, _table)
