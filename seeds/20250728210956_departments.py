from __future__ import annotations

from models import Department
from seeds.helpers import replace_rows, stamped


MODEL = Department


def seed(db) -> int:
    rows = [
        {
            "id": 1,
            "name": "Engineering",
            "description": "Handles all software development and infrastructure.",
            "status": "active",
            "created_by": 1,
        },
        {
            "id": 2,
            "name": "Product",
            "description": "Manages product strategy, roadmap, and design.",
            "status": "active",
            "created_by": 1,
        },
        {
            "id": 3,
            "name": "Marketing & Sales",
            "description": "Drives growth, branding, and revenue.",
            "status": "active",
            "created_by": 2,
        },
        {
            "id": 4,
            "name": "People Operations",
            "description": "Manages HR, recruitment, and company culture.",
            "status": "active",
            "created_by": 2,
        },
    ]
    return replace_rows(db, Department, stamped(rows))
