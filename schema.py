from __future__ import annotations

import glob
import importlib
import logging
import os
from datetime import datetime, timezone
from types import ModuleType

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, delete, func, insert, select
from sqlalchemy.engine import Engine


_log = logging.getLogger("schema")

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "migrations")
MIGRATIONS_PACKAGE = "migrations"

_tracking_metadata = MetaData()
schema_migrations = Table(
    "schema_migrations",
    _tracking_metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False, unique=True),
    Column("batch", Integer, nullable=False),
    Column("migrated_at", DateTime(timezone=True), nullable=False),
)


class MigrationError(RuntimeError):
    pass


def _is_migration_file(path: str) -> bool:
    stem = os.path.splitext(os.path.basename(path))[0]
    ts, _sep, table = stem.partition("_")
    return len(ts) == 14 and ts.isdigit() and bool(table)


def load_migrations() -> list[tuple[str, ModuleType]]:
    """
    Discover migration modules, ordered by name (timestamp prefix first).

    Every module must expose `up(conn)` and `down(conn)`.
    """
    out: list[tuple[str, ModuleType]] = []
    for path in sorted(glob.glob(os.path.join(MIGRATIONS_DIR, "*.py"))):
        if not _is_migration_file(path):
            continue
        name = os.path.splitext(os.path.basename(path))[0]
        module = importlib.import_module(f"{MIGRATIONS_PACKAGE}.{name}")
        if not callable(getattr(module, "up", None)) or not callable(getattr(module, "down", None)):
            raise MigrationError(f"Migration {name} must define up() and down()")
        out.append((name, module))
    return out


def _ensure_tracking_table(engine: Engine) -> None:
    _tracking_metadata.create_all(engine, checkfirst=True)


def applied_migrations(engine: Engine) -> list[dict]:
    _ensure_tracking_table(engine)
    with engine.connect() as conn:
        rows = conn.execute(select(schema_migrations).order_by(schema_migrations.c.id)).mappings().all()
    return [dict(r) for r in rows]


def migration_status(engine: Engine) -> tuple[list[str], list[str]]:
    applied = [r["name"] for r in applied_migrations(engine)]
    done = set(applied)
    pending = [name for name, _module in load_migrations() if name not in done]
    return applied, pending


def migrate_latest(engine: Engine) -> list[str]:
    """Apply every pending migration as one new batch. Returns the applied names."""
    _ensure_tracking_table(engine)
    with engine.connect() as conn:
        done = set(conn.execute(select(schema_migrations.c.name)).scalars().all())
        batch = int(conn.execute(select(func.max(schema_migrations.c.batch))).scalar() or 0) + 1

    applied: list[str] = []
    for name, module in load_migrations():
        if name in done:
            continue
        try:
            with engine.begin() as conn:
                module.up(conn)
                conn.execute(
                    insert(schema_migrations).values(
                        name=name,
                        batch=batch,
                        migrated_at=datetime.now(timezone.utc),
                    )
                )
        except Exception:
            _log.exception("Migration failed name=%s batch=%s", name, batch)
            raise
        _log.info("Migrated name=%s batch=%s", name, batch)
        applied.append(name)

    if not applied:
        _log.info("Already up to date")
    return applied


def rollback(engine: Engine, *, all_batches: bool = False) -> list[str]:
    """
    Revert the most recent batch (or every batch) in reverse order.

    Returns the reverted names.
    """
    rows = applied_migrations(engine)
    if not rows:
        _log.info("Nothing to roll back")
        return []

    if not all_batches:
        last = max(int(r["batch"]) for r in rows)
        rows = [r for r in rows if int(r["batch"]) == last]

    modules = dict(load_migrations())
    missing = [r["name"] for r in rows if r["name"] not in modules]
    if missing:
        raise MigrationError(f"Recorded migrations have no module: {', '.join(missing)}")

    reverted: list[str] = []
    for row in reversed(rows):
        name = row["name"]
        try:
            with engine.begin() as conn:
                modules[name].down(conn)
                conn.execute(delete(schema_migrations).where(schema_migrations.c.name == name))
        except Exception:
            _log.exception("Rollback failed name=%s batch=%s", name, row["batch"])
            raise
        _log.info("Rolled back name=%s batch=%s", name, row["batch"])
        reverted.append(name)
    return reverted
