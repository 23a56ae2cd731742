from __future__ import annotations

from sqlalchemy import BigInteger, Column, ForeignKey, Index, Integer, MetaData, String, Table

from migrations.helpers import create_table, drop_table, timestamps


def _table(metadata: MetaData) -> Table:
    return Table(
        "application_documents",
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column(
            "application_id",
            BigInteger,
            ForeignKey("applications.id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
        Column("document_type", String(100), nullable=False),
        Column("url", String(1000), nullable=False),
        Column("filename", String(255), nullable=False),
        *timestamps(),
        Index("idx_application_documents_application_id", "application_id"),
        Index("idx_application_documents_document_type", "document_type"),
    )


def up(conn) -> None:
    create_table(conn, _table, referents=("applications",))


def down(conn) -> None:
    drop_table(conn, _table)
