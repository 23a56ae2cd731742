"""Public applicants. Independent of `users`; soft-deleted via `deleted_at`."""
from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, String, Table

from migrations.helpers import create_table, deleted_at, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "candidates",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("uuid", String(36), nullable=False, unique=True),
        Column("email", String(255), nullable=False, unique=True),
        Column("full_name", String(255), nullable=False),
        Column("domicile", String(255), nullable=True),
        Column("university", String(255), nullable=True),
        Column("major", String(255), nullable=True),
        Column("semester", String(10), nullable=True),
        Column("instagram_url", String(500), nullable=True),
        Column("whatsapp_number", String(20), nullable=True, unique=True),
        *timestamps(),
        deleted_at(),
        Index("idx_candidates_uuid", "uuid"),
        Index("idx_candidates_email", "email"),
    )


def up(conn) -> None:
    create_table(conn, _table)


def down(conn) -> None:
    drop_table(conn, _table)
