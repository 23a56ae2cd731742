from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, Column, ForeignKey, Index, Integer, MetaData, Table, Text, true

from migrations.helpers import create_table, deleted_at, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "application_notes",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column(
            "application_id",
            BigInteger,
            ForeignKey("applications.id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
        Column("user_id", BigInteger, ForeignKey("users.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False),
        Column("note", Text, nullable=False),
        Column("is_internal", Boolean, server_default=true()),
        *timestamps(),
        deleted_at(),
        Index("idx_application_notes_application_id", "application_id"),
        Index("idx_application_notes_user_id", "user_id"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("applications", "users"))


def down(conn) -> None:
    drop_table(conn, _table)
