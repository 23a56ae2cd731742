from __future__ import annotations

from models import Role
from seeds.helpers import replace_rows, stamped


MODEL = Role


def seed(db) -> int:
    return replace_rows(
        db,
        Role,
        stamped(
            [
                {
                    "id": 1,
                    "name": "super_admin",
                    "display_name": "Super Admin",
                    "description": "Full system access and control",
                },
                {
                    "id": 2,
                    "name": "head_of_hr",
                    "display_name": "Head of HR",
                    "description": "Strategic HR oversight and team management",
                },
                {
                    "id": 3,
                    "name": "hr_staff",
                    "display_name": "HR Staff",
                    "description": "Day-to-day recruitment operations",
                },
            ]
        ),
    )
