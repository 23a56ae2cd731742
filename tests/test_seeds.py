from __future__ import annotations

from types import SimpleNamespace

import pytest
from sqlalchemy import func, select
from sqlalchemy import table as sa_table
from sqlalchemy.dialects import postgresql

from db import SessionLocal
from models import (
    ActivityLog,
    Application,
    ApplicationNote,
    EmailVerificationToken,
    JobPosting,
    Permission,
    Role,
    Session as LoginSession,
    SystemSetting,
    User,
)
from passwords import verify_password
from seeder import load_seeds, run_seeds
from seeds.helpers import sync_id_sequence


EXPECTED_COUNTS = {
    "roles": 3,
    "permissions": 23,
    "job_categories": 5,
    "system_settings": 5,
    "job_types": 4,
    "employment_levels": 6,
    "job_posting_statuses": 4,
    "application_statuses": 4,
    "candidates": 10,
    "email_notifications": 3,
    "users": 10,
    "role_permissions": 50,
    "departments": 4,
    "password_reset_tokens": 3,
    "sessions": 3,
    "activity_logs": 3,
    "job_postings": 10,
    "applications": 10,
    "job_views": 5,
    "application_documents": 12,
    "application_notes": 4,
    "monthly_analytics": 2,
    "email_verification_tokens": 5,
}


def _table_count(engine, table: str) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(sa_table(table))).scalar_one()


def test_seed_modules_cover_every_table_in_order():
    assert [table for table, _module in load_seeds()] == list(EXPECTED_COUNTS)


def test_run_seeds_inserts_fixture_rows(migrated):
    counts = run_seeds(migrated)

    assert counts == EXPECTED_COUNTS
    for table, expected in EXPECTED_COUNTS.items():
        assert _table_count(migrated, table) == expected, table


def test_reseeding_populated_database(seeded):
    assert run_seeds(seeded) == EXPECTED_COUNTS
    assert _table_count(seeded, "users") == 10


def test_only_restricts_run(migrated):
    counts = run_seeds(migrated, only=["roles", "permissions"])
    assert counts == {"roles": 3, "permissions": 23}
    assert _table_count(migrated, "users") == 0


def test_unknown_table_is_rejected(migrated):
    with pytest.raises(ValueError):
        run_seeds(migrated, only=["nope"])


def test_role_permission_matrix(seeded):
    with SessionLocal() as db:
        roles = {r.name: r for r in db.scalars(select(Role))}
        assert len(roles["super_admin"].permissions) == 23
        head = {p.name for p in roles["head_of_hr"].permissions}
        assert len(head) == 21
        assert "system.audit" in head
        assert "system.settings" not in head
        assert {p.name for p in roles["hr_staff"].permissions} == {
            "jobs.view",
            "jobs.update",
            "jobs.publish",
            "applications.view",
            "applications.review",
            "analytics.view",
        }


def test_users_share_hashed_default_password(seeded):
    with SessionLocal() as db:
        admin = db.scalars(select(User).where(User.email == "admin@ccp.com")).one()
        assert admin.id == 1
        assert admin.role_id == 1
        assert admin.password != "SecurePass123!"
        assert verify_password("SecurePass123!", admin.password)

        inactive = db.scalars(select(User).where(User.status == "inactive")).all()
        assert [u.email for u in inactive] == ["fitri.rahmawati@ccp.com"]
        assert len({u.uuid for u in db.scalars(select(User))}) == 10


def test_cross_references_are_pinned(seeded):
    with SessionLocal() as db:
        app3 = db.get(Application, 3)
        assert app3.application_number == "APP-2025-003"
        assert app3.uuid == "550e8400-e29b-41d4-a716-446655440003"
        assert db.get(JobPosting, app3.job_posting_id).slug == "devops-engineer"

        log = db.scalars(select(ActivityLog).where(ActivityLog.action == "application.reviewed")).one()
        assert log.old_values == {"status_id": 1}
        assert log.subject.id == 1


def test_settings_and_tokens(seeded):
    with SessionLocal() as db:
        setting = db.scalars(select(SystemSetting).where(SystemSetting.key == "max_applications_per_user")).one()
        assert (setting.value, setting.type, setting.is_public) == ("3", "integer", False)

        tokens = {t.id: t for t in db.scalars(select(EmailVerificationToken))}
        assert tokens[2].is_used is True
        assert tokens[4].is_expired(tokens[4].created_at) is True
        assert tokens[1].is_expired(tokens[1].created_at) is False
        assert len({t.token for t in tokens.values()}) == 5

        assert db.scalar(select(func.count()).select_from(Permission)) == 23


def _note_rows(db) -> list[tuple]:
    cols = [c for c in ApplicationNote.__table__.c if c.name != "id"]
    return [tuple(r) for r in db.execute(select(*cols).order_by(*cols)).all()]


def test_rerunning_a_loader_keeps_the_same_rows(seeded):
    loader = dict(load_seeds())["application_notes"]
    with SessionLocal() as db:
        before = _note_rows(db)
        assert loader.seed(db) == 4
        db.commit()

    with SessionLocal() as db:
        after = _note_rows(db)
    assert len(after) == 4
    assert after == before


def test_new_rows_follow_seeded_ids(seeded):
    with SessionLocal() as db:
        user = User(uuid="new-user-uuid", email="new.user@ccp.com", password="x", name="New User")
        db.add(user)
        db.commit()
        assert user.id == 11


class _RecordingSession:
    def __init__(self, dialect: str):
        self.bind = SimpleNamespace(dialect=SimpleNamespace(name=dialect))
        self.statements = []

    def get_bind(self):
        return self.bind

    def execute(self, stmt, params=None):
        self.statements.append(stmt)


def test_sequence_sync_on_postgresql():
    db = _RecordingSession("postgresql")
    sync_id_sequence(db, User, [{"id": 1}, {"id": 2}])

    assert len(db.statements) == 1
    sql = str(db.statements[0].compile(dialect=postgresql.dialect()))
    assert "setval(pg_get_serial_sequence(" in sql
    assert "max(users.id)" in sql


def test_sequence_sync_skips_other_cases():
    sqlite_db = _RecordingSession("sqlite")
    sync_id_sequence(sqlite_db, User, [{"id": 1}])
    assert sqlite_db.statements == []

    pg_db = _RecordingSession("postgresql")
    sync_id_sequence(pg_db, User, [{"email": "a@b.c"}])
    sync_id_sequence(pg_db, LoginSession, [{"id": "session_admin_001"}])
    assert pg_db.statements == []
