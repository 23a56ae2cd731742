"""Per-month recruitment rollups, one row per (year, month)."""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, ForeignKey, Integer, MetaData, Numeric, Table, UniqueConstraint, text

from migrations.helpers import create_table, drop_table, timestamps


def _counter(name: str) -> Column:
    return Column(name, Integer, server_default=text("0"))


def _table(metadata: MetaData) -> Table:
    return Table(
        "monthly_analytics",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("year", Integer, nullable=False),
        Column("month", Integer, nullable=False),
        _counter("total_job_postings"),
        _counter("total_applications"),
        _counter("total_approved_applications"),
        _counter("total_rejected_applications"),
        _counter("total_job_views"),
        Column("avg_applications_per_job", Numeric(8, 2), server_default=text("0")),
        Column(
            "top_department_id",
            BigInteger,
            ForeignKey("departments.id", ondelete="SET NULL", onupdate="CASCADE"),
            nullable=True,
        ),
        Column(
            "top_job_category_id",
            BigInteger,
            ForeignKey("job_categories.id", ondelete="SET NULL", onupdate="CASCADE"),
            nullable=True,
        ),
        *timestamps(),
        UniqueConstraint("year", "month", name="idx_monthly_analytics_year_month_unique"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("departments", "job_categories"))


def down(conn) -> None:
    drop_table(conn, _table)
