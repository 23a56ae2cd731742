"""Key/value application settings; `is_public` rows may be exposed to anonymous clients."""
from __future__ import annotations

from sqlalchemy import Boolean, Column, Enum, Index, Integer, MetaData, String, Table, Text, false

from migrations.helpers import create_table, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "system_settings",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("key", String(100), nullable=False, unique=True),
        Column("value", Text, nullable=True),
        Column(
            "type",
            Enum("string", "integer", "boolean", "json", "text", name="system_setting_type"),
            server_default="string",
        ),
        Column("description", Text, nullable=True),
        Column("is_public", Boolean, server_default=false()),
        *timestamps(),
        Index("idx_system_settings_key", "key"),
    )


def up(conn) -> None:
    create_table(conn, _table)


def down(conn) -> None:
    drop_table(conn, _table)
