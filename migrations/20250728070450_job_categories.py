from __future__ import annotations

from sqlalchemy import Column, Enum, Index, Integer, MetaData, String, Table, Text

from migrations.helpers import create_table, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "job_categories",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("name", String(255), nullable=False),
        Column("slug", String(255), nullable=False, unique=True),
        Column("description", Text, nullable=True),
        Column("status", Enum("active", "inactive", name="job_category_status"), server_default="active"),
        *timestamps(),
        Index("idx_job_categories_slug", "slug"),
        Index("idx_job_categories_status", "status"),
    )


def up(conn) -> None:
    create_table(conn, _table)


def down(conn) -> None:
    drop_table(conn, _table)
