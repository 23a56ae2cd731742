from __future__ import annotations

import pytest
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from db import SessionLocal
from models import (
    Application,
    Department,
    JobPosting,
    JobView,
    MonthlyAnalytics,
    Permission,
    Role,
    RolePermission,
    User,
)


def _count(db, model, *where) -> int:
    return db.execute(select(func.count()).select_from(model).where(*where)).scalar_one()


def test_deleting_role_cascades_to_role_permissions(migrated):
    with SessionLocal() as db:
        db.add(Role(id=1, name="auditor", display_name="Auditor"))
        db.add(Permission(id=1, name="system.audit"))
        db.flush()
        db.add(RolePermission(role_id=1, permission_id=1))
        db.commit()

        db.execute(delete(Role).where(Role.id == 1))
        db.commit()

        assert _count(db, RolePermission) == 0
        assert _count(db, Permission) == 1


def test_deleting_user_referenced_by_department_is_rejected(seeded):
    with SessionLocal() as db:
        assert _count(db, Department, Department.created_by == 2) == 2
        with pytest.raises(IntegrityError):
            db.execute(delete(User).where(User.id == 2))
            db.commit()
        db.rollback()
        assert _count(db, User, User.id == 2) == 1


def test_deleting_department_nulls_references(seeded):
    with SessionLocal() as db:
        db.execute(delete(Department).where(Department.id == 1))
        db.commit()

        assert _count(db, JobPosting, JobPosting.department_id == 1) == 0
        assert _count(db, JobPosting, JobPosting.department_id.is_(None)) == 4
        assert _count(db, MonthlyAnalytics, MonthlyAnalytics.top_department_id.is_(None)) == 2


def test_job_posting_with_applications_cannot_be_deleted(seeded):
    with SessionLocal() as db:
        with pytest.raises(IntegrityError):
            db.execute(delete(JobPosting).where(JobPosting.id == 1))
            db.commit()
        db.rollback()


def test_deleting_job_posting_cascades_to_views(seeded):
    with SessionLocal() as db:
        db.execute(delete(Application).where(Application.job_posting_id == 3))
        db.execute(delete(JobPosting).where(JobPosting.id == 3))
        db.commit()

        assert _count(db, JobView, JobView.job_posting_id == 3) == 0
        assert _count(db, JobView) == 4
