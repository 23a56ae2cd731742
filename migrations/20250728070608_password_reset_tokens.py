from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Index, MetaData, String, Table

from migrations.helpers import create_table, drop_table


def _table(metadata: MetaData) -> Table:
    return Table(
        "password_reset_tokens",
        metadata,
        Column(
            "email",
            String(255),
            ForeignKey("users.email", ondelete="CASCADE", onupdate="CASCADE"),
            primary_key=True,
        ),
        Column("token", String(255), nullable=False),
        Column("created_at", DateTime(timezone=True), nullable=False),
        Index("idx_password_reset_tokens_token", "token"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("users",))


def down(conn) -> None:
    drop_table(conn, _table)
