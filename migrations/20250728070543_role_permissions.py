"""Role <-> permission join table. Rows follow their role or permission on delete."""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, ForeignKey, Index, MetaData, Table

from migrations.helpers import create_table, drop_table


def _table(metadata: MetaData) -> Table:
    return Table(
        "role_permissions",
        metadata,
        Column(
            "role_id",
            BigInteger,
            ForeignKey("roles.id", ondelete="CASCADE", onupdate="CASCADE"),
            primary_key=True,
        ),
        Column(
            "permission_id",
            BigInteger,
            ForeignKey("permissions.id", ondelete="CASCADE", onupdate="CASCADE"),
            primary_key=True,
        ),
        Index("idx_role_permissions_role_id", "role_id"),
        Index("idx_role_permissions_permission_id", "permission_id"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("roles", "permissions"))


def down(conn) -> None:
    drop_table(conn, _table)
