"""
Outbound email log.

`related_type` / `related_id` form a loose polymorphic reference (no foreign key).
"""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, Enum, Index, Integer, MetaData, String, Table, Text, text

from migrations.helpers import create_table, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "email_notifications",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("recipient_email", String(255), nullable=False),
        Column("subject", String(500), nullable=False),
        Column("body", Text, nullable=False),
        Column("related_type", String(100), nullable=True),
        Column("related_id", BigInteger, nullable=True),
        Column(
            "status",
            Enum("pending", "sent", "failed", "bounced", name="email_notification_status"),
            server_default="pending",
        ),
        Column("sent_at", DateTime(timezone=True), nullable=True),
        Column("failed_reason", Text, nullable=True),
        Column("attempts", Integer, server_default=text("0")),
        *timestamps(),
        Index("idx_email_notifications_recipient", "recipient_email"),
        Index("idx_email_notifications_status", "status"),
        Index("idx_email_notifications_related", "related_type", "related_id"),
    )


def up(conn) -> None:
    create_table(conn, _table)


def down(conn) -> None:
    drop_table(conn, _table)
