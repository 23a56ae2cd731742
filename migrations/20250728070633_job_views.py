from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Index, Integer, MetaData, String, Table, Text

from migrations.helpers import create_table, drop_table


def _table(metadata: MetaData) -> Table:
    return Table(
        "job_views",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column(
            "job_posting_id",
            BigInteger,
            ForeignKey("job_postings.id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
        Column("ip_address", String(45), nullable=False),
        Column("user_agent", Text, nullable=True),
        Column("referrer", String(1000), nullable=True),
        Column("session_id", String(255), nullable=True),
        Column("viewed_at", DateTime(timezone=True), nullable=False),
        Index("idx_job_views_job_posting_id", "job_posting_id"),
        Index("idx_job_views_ip_address", "ip_address"),
        Index("idx_job_views_viewed_at", "viewed_at"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("job_postings",))


def down(conn) -> None:
    drop_table(conn, _table)
