from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Integer, delete, func, insert, select
from sqlalchemy.orm import Session as DbSession


BASE_TIMESTAMP = datetime(2025, 7, 28, 21, 10, 30, tzinfo=timezone.utc)

WINDOWS_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
MAC_UA = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"
LINUX_UA = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36"
IPHONE_UA = "Mozilla/5.0 (iPhone; CPU iPhone OS 14_7_1 like Mac OS X) AppleWebKit/605.1.15"


def stamped(rows: list[dict], at: datetime = BASE_TIMESTAMP) -> list[dict]:
    """Fill `created_at` / `updated_at` on rows that do not set them."""
    return [{"created_at": at, "updated_at": at, **row} for row in rows]


def clear(db: DbSession, model) -> None:
    db.execute(delete(model))


def sync_id_sequence(db: DbSession, model, rows: list[dict]) -> None:
    """
    Move a PostgreSQL serial sequence past explicitly inserted ids.

    Other dialects derive the next autoincrement id from the table itself.
    """
    if db.get_bind().dialect.name != "postgresql":
        return
    id_col = model.__table__.c.get("id")
    if id_col is None or not isinstance(id_col.type, Integer):
        return
    if not any(row.get("id") is not None for row in rows):
        return
    highest = select(func.coalesce(func.max(id_col), 1)).scalar_subquery()
    db.execute(select(func.setval(func.pg_get_serial_sequence(model.__tablename__, "id"), highest)))


def replace_rows(db: DbSession, model, rows: list[dict]) -> int:
    """Delete every row of `model`'s table, then insert `rows`. Returns the inserted count."""
    clear(db, model)
    if rows:
        db.execute(insert(model), rows)
        sync_id_sequence(db, model, rows)
    return len(rows)
