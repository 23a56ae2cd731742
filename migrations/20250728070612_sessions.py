from __future__ import annotations

from sqlalchemy import BigInteger, Column, ForeignKey, Index, Integer, MetaData, String, Table, Text

from migrations.helpers import create_table, drop_table


def _table(metadata: MetaData) -> Table:
    return Table(
        "sessions",
        metadata,
        Column("id", String(255), primary_key=True),
        Column("user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=True),
        Column("ip_address", String(45), nullable=True),
        Column("user_agent", Text, nullable=True),
        Column("payload", Text, nullable=False),
        # Unix epoch seconds.
        Column("last_activity", Integer, nullable=False),
        Index("idx_sessions_user_id", "user_id"),
        Index("idx_sessions_last_activity", "last_activity"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("users",))


def down(conn) -> None:
    drop_table(conn, _table)
