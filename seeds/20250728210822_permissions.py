from __future__ import annotations

from models import Permission
from seeds.helpers import replace_rows, stamped


MODEL = Permission

# Ids are referenced by the role_permissions loader.
PERMISSIONS = [
    ("users.view", "View user accounts"),
    ("users.create", "Create new user accounts"),
    ("users.update", "Update user accounts"),
    ("users.delete", "Delete user accounts"),
    ("roles.view", "View roles and permissions"),
    ("roles.create", "Create new roles"),
    ("roles.update", "Update existing roles"),
    ("roles.delete", "Delete roles"),
    ("jobs.view", "View job postings"),
    ("jobs.create", "Create job postings"),
    ("jobs.update", "Update job postings"),
    ("jobs.delete", "Delete job postings"),
    ("jobs.publish", "Publish job postings"),
    ("applications.view", "View applications"),
    ("applications.review", "Review applications"),
    ("applications.approve", "Approve applications"),
    ("applications.reject", "Reject applications"),
    ("analytics.view", "View analytics and reports"),
    ("analytics.export", "Export reports"),
    ("analytics.executive", "View executive dashboard"),
    ("system.settings", "Manage system settings"),
    ("system.audit", "View audit logs"),
    ("system.maintenance", "Perform system maintenance"),
]


def seed(db) -> int:
    rows = [
        {"id": idx, "name": name, "description": description}
        for idx, (name, description) in enumerate(PERMISSIONS, start=1)
    ]
    return replace_rows(db, Permission, stamped(rows))
