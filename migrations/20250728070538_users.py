from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, Enum, ForeignKey, Index, Integer, MetaData, String, Table

from migrations.helpers import create_table, deleted_at, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "users",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("uuid", String(36), nullable=False, unique=True),
        Column("email", String(255), nullable=False, unique=True),
        Column("password", String(255), nullable=False),
        Column("name", String(255), nullable=False),
        Column("role_id", BigInteger, ForeignKey("roles.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=True),
        Column("status", Enum("active", "inactive", "suspended", name="user_status"), server_default="active"),
        Column("email_verified_at", DateTime(timezone=True), nullable=True),
        Column("last_login_at", DateTime(timezone=True), nullable=True),
        *timestamps(),
        deleted_at(),
        Index("idx_users_email", "email"),
        Index("idx_users_uuid", "uuid"),
        Index("idx_users_role_id", "role_id"),
        Index("idx_users_status", "status"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("roles",))


def down(conn) -> None:
    drop_table(conn, _table)
