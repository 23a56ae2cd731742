from __future__ import annotations

from sqlalchemy import BigInteger, Column, Enum, ForeignKey, Index, Integer, MetaData, String, Table, Text

from migrations.helpers import create_table, deleted_at, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "departments",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("name", String(255), nullable=False),
        Column("description", Text, nullable=True),
        Column("status", Enum("active", "inactive", name="department_status"), server_default="active"),
        # A user who created a department cannot be hard-deleted.
        Column(
            "created_by",
            BigInteger,
            ForeignKey("users.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
        ),
        *timestamps(),
        deleted_at(),
        Index("idx_departments_name", "name"),
        Index("idx_departments_status", "status"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("users",))


def down(conn) -> None:
    drop_table(conn, _table)
