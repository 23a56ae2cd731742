"""
Job postings.

Lookup references (type, level, status) are RESTRICT: a lookup row in use cannot be
removed. Department and category references are SET NULL.
"""
from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    false,
    text,
)

from migrations.helpers import create_table, deleted_at, drop_table, timestamps


def _fk(target: str, ondelete: str) -> ForeignKey:
    return ForeignKey(target, ondelete=ondelete, onupdate="CASCADE")


def _table(metadata: MetaData) -> Table:
    return Table(
        "job_postings",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("uuid", String(36), nullable=False, unique=True),
        Column("title", String(255), nullable=False),
        Column("slug", String(255), nullable=False, unique=True),
        Column("department_id", BigInteger, _fk("departments.id", "SET NULL"), nullable=True),
        Column("job_category_id", BigInteger, _fk("job_categories.id", "SET NULL"), nullable=True),
        Column("job_type_id", BigInteger, _fk("job_types.id", "RESTRICT"), nullable=False),
        Column("employment_level_id", BigInteger, _fk("employment_levels.id", "RESTRICT"), nullable=False),
        Column(
            "status_id",
            BigInteger,
            _fk("job_posting_statuses.id", "RESTRICT"),
            nullable=False,
            server_default=text("1"),
        ),
        Column("priority_level", Enum("normal", "urgent", name="job_posting_priority"), server_default="normal"),
        Column("description", Text, nullable=False),
        Column("requirements", Text, nullable=False),
        Column("responsibilities", Text, nullable=False),
        Column("benefits", Text, nullable=True),
        Column("team_info", Text, nullable=True),
        Column("salary_min", Numeric(15, 2), nullable=True),
        Column("salary_max", Numeric(15, 2), nullable=True),
        Column("is_salary_negotiable", Boolean, server_default=false()),
        Column("location", String(255), nullable=True),
        Column("is_remote", Boolean, server_default=false()),
        Column("application_deadline", Date, nullable=True),
        Column("max_applications", Integer, nullable=True),
        Column("views_count", Integer, server_default=text("0")),
        Column("applications_count", Integer, server_default=text("0")),
        Column("published_at", DateTime(timezone=True), nullable=True),
        Column("closed_at", DateTime(timezone=True), nullable=True),
        Column("created_by", BigInteger, _fk("users.id", "RESTRICT"), nullable=False),
        Column("updated_by", BigInteger, _fk("users.id", "SET NULL"), nullable=True),
        *timestamps(),
        deleted_at(),
        Index("idx_job_postings_uuid", "uuid"),
        Index("idx_job_postings_slug", "slug"),
        Index("idx_job_postings_department_id", "department_id"),
        Index("idx_job_postings_job_category_id", "job_category_id"),
        Index("idx_job_postings_job_type_id", "job_type_id"),
        Index("idx_job_postings_employment_level_id", "employment_level_id"),
        Index("idx_job_postings_status_id", "status_id"),
        Index("idx_job_postings_published_at", "published_at"),
        Index("idx_job_postings_created_by", "created_by"),
    )


def up(conn) -> None:
    create_table(
        conn,
        _table,
        referents=("departments", "job_categories", "job_types", "employment_levels", "job_posting_statuses", "users"),
    )


def down(conn) -> None:
    drop_table(conn, _table)
