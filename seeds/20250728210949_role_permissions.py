from __future__ import annotations

from models import RolePermission
from seeds.helpers import replace_rows


MODEL = RolePermission

ROLE_PERMISSIONS = {
    # super_admin: everything
    1: list(range(1, 24)),
    # head_of_hr: everything except system settings and maintenance
    2: list(range(1, 21)) + [22],
    # hr_staff: view/update/publish jobs, view/review applications, view analytics
    3: [9, 11, 13, 14, 15, 18],
}


def seed(db) -> int:
    rows = [
        {"role_id": role_id, "permission_id": permission_id}
        for role_id, permission_ids in ROLE_PERMISSIONS.items()
        for permission_id in permission_ids
    ]
    return replace_rows(db, RolePermission, rows)
