from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, String, Table

from migrations.helpers import create_table, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "job_types",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("name", String(100), nullable=False, unique=True),
        *timestamps(),
        Index("idx_job_types_name", "name"),
    )


def up(conn) -> None:
    create_table(conn, _table)


def down(conn) -> None:
    drop_table(conn, _table)
