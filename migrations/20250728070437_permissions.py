from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text

from migrations.helpers import create_table, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "permissions",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("name", String(100), nullable=False, unique=True),
        Column("description", Text, nullable=True),
        *timestamps(),
        Index("idx_permissions_name", "name"),
    )


def up(conn) -> None:
    create_table(conn, _table)


def down(conn) -> None:
    drop_table(conn, _table)
