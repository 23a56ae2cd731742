from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import NoSuchTableError

from models import Base
from schema import (
    MigrationError,
    applied_migrations,
    load_migrations,
    migrate_latest,
    migration_status,
    rollback,
    schema_migrations,
)


EXPECTED_TABLES = [
    "roles",
    "permissions",
    "job_categories",
    "system_settings",
    "job_types",
    "employment_levels",
    "job_posting_statuses",
    "application_statuses",
    "candidates",
    "email_notifications",
    "users",
    "role_permissions",
    "departments",
    "password_reset_tokens",
    "sessions",
    "activity_logs",
    "job_postings",
    "applications",
    "job_views",
    "application_documents",
    "application_notes",
    "monthly_analytics",
    "email_verification_tokens",
]


def _tables(engine) -> set[str]:
    return set(inspect(engine).get_table_names())


def test_migrations_are_ordered_by_timestamp():
    names = [name for name, _module in load_migrations()]
    assert names == sorted(names)
    assert [n.split("_", 1)[1] for n in names] == EXPECTED_TABLES


def test_migrate_latest_creates_every_table(engine):
    applied = migrate_latest(engine)

    assert len(applied) == len(EXPECTED_TABLES)
    assert set(EXPECTED_TABLES) <= _tables(engine)
    rows = applied_migrations(engine)
    assert {r["batch"] for r in rows} == {1}
    assert migration_status(engine) == (applied, [])


def test_migrate_latest_is_idempotent(migrated):
    assert migrate_latest(migrated) == []
    assert len(applied_migrations(migrated)) == len(EXPECTED_TABLES)


def test_each_migration_up_then_down(engine):
    for name, module in load_migrations():
        table = name.split("_", 1)[1]
        with engine.begin() as conn:
            module.up(conn)
        assert table in _tables(engine), name

    for name, module in reversed(load_migrations()):
        table = name.split("_", 1)[1]
        with engine.begin() as conn:
            module.down(conn)
        assert table not in _tables(engine), name


def test_child_before_parent_fails(engine):
    modules = dict(load_migrations())
    users = modules["20250728070538_users"]
    with pytest.raises(NoSuchTableError):
        with engine.begin() as conn:
            users.up(conn)
    assert "users" not in _tables(engine)


def test_rollback_reverts_latest_batch_only(migrated):
    modules = load_migrations()
    # Simulate a second batch by rolling back the newest table and re-applying it.
    last_name = modules[-1][0]
    with migrated.begin() as conn:
        conn.execute(schema_migrations.delete().where(schema_migrations.c.name == last_name))
        modules[-1][1].down(conn)
    assert migrate_latest(migrated) == [last_name]

    assert rollback(migrated) == [last_name]
    assert "email_verification_tokens" not in _tables(migrated)
    assert "users" in _tables(migrated)
    applied, pending = migration_status(migrated)
    assert pending == [last_name]


def test_rollback_all_drops_everything(migrated):
    reverted = rollback(migrated, all_batches=True)

    assert reverted == list(reversed([name for name, _m in load_migrations()]))
    assert _tables(migrated) & set(EXPECTED_TABLES) == set()
    assert applied_migrations(migrated) == []
    assert rollback(migrated) == []


def test_rollback_with_unknown_recorded_migration(migrated):
    with migrated.begin() as conn:
        conn.execute(
            schema_migrations.insert().values(
                name="20990101000000_ghost", batch=99, migrated_at=datetime.now(timezone.utc)
            )
        )
    with pytest.raises(MigrationError):
        rollback(migrated)


def test_models_match_migrated_columns(migrated):
    insp = inspect(migrated)
    assert set(Base.metadata.tables) == set(EXPECTED_TABLES)
    for name, table in Base.metadata.tables.items():
        db_cols = {c["name"] for c in insp.get_columns(name)}
        assert db_cols == set(table.columns.keys()), name


def test_named_indexes_exist(migrated):
    insp = inspect(migrated)
    job_posting_indexes = {ix["name"] for ix in insp.get_indexes("job_postings")}
    assert {"idx_job_postings_slug", "idx_job_postings_status_id", "idx_job_postings_created_by"} <= job_posting_indexes

    uniques = {uc["name"] for uc in insp.get_unique_constraints("monthly_analytics")}
    assert "idx_monthly_analytics_year_month_unique" in uniques
