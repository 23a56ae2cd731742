from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    false,
    text,
)

from migrations.helpers import create_table, deleted_at, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "applications",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("uuid", String(36), nullable=False, unique=True),
        Column(
            "job_posting_id",
            BigInteger,
            ForeignKey("job_postings.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
        ),
        Column(
            "candidate_id",
            BigInteger,
            ForeignKey("candidates.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
        ),
        Column("application_number", String(50), nullable=False, unique=True),
        Column(
            "status_id",
            BigInteger,
            ForeignKey("application_statuses.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
            server_default=text("1"),
        ),
        Column("rejection_reason", Text, nullable=True),
        Column("approved_at", DateTime(timezone=True), nullable=True),
        Column("rejected_at", DateTime(timezone=True), nullable=True),
        Column(
            "reviewed_by",
            BigInteger,
            ForeignKey("users.id", ondelete="SET NULL", onupdate="CASCADE"),
            nullable=True,
        ),
        Column("reviewed_at", DateTime(timezone=True), nullable=True),
        Column("approval_email_sent", Boolean, server_default=false()),
        Column("approval_email_sent_at", DateTime(timezone=True), nullable=True),
        Column("ip_address", String(45), nullable=True),
        Column("user_agent", Text, nullable=True),
        Column("source", String(100), server_default="website"),
        *timestamps(),
        deleted_at(),
        Index("idx_applications_uuid", "uuid"),
        Index("idx_applications_application_number", "application_number"),
        Index("idx_applications_job_posting_id", "job_posting_id"),
        Index("idx_applications_candidate_id", "candidate_id"),
        Index("idx_applications_status_id", "status_id"),
        Index("idx_applications_reviewed_by", "reviewed_by"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("job_postings", "candidates", "application_statuses", "users"))


def down(conn) -> None:
    drop_table(conn, _table)
