from __future__ import annotations

from datetime import datetime, timezone

from models import ActivityLog, RelatedType
from seeds.helpers import MAC_UA, WINDOWS_UA, replace_rows


MODEL = ActivityLog


def seed(db) -> int:
    rows = [
        {
            "user_id": 2,
            "action": "job_posting.created",
            "subject_type": RelatedType.JOB_POSTING.value,
            "subject_id": 1,
            "description": "Created new job posting: Senior Backend Engineer",
            "old_values": None,
            "new_values": {"title": "Senior Backend Engineer", "department_id": 1},
            "ip_address": "192.168.1.101",
            "user_agent": MAC_UA,
            "created_at": datetime(2025, 7, 20, 10, 0, tzinfo=timezone.utc),
        },
        {
            "user_id": 3,
            "action": "application.reviewed",
            "subject_type": RelatedType.APPLICATION.value,
            "subject_id": 1,
            "description": "Reviewed application CC-2025-0001",
            "old_values": {"status_id": 1},
            "new_values": {"status_id": 2},
            "ip_address": "192.168.1.102",
            "user_agent": WINDOWS_UA,
            "created_at": datetime(2025, 7, 28, 10, 0, tzinfo=timezone.utc),
        },
        {
            "user_id": 2,
            "action": "application.approved",
            "subject_type": RelatedType.APPLICATION.value,
            "subject_id": 3,
            "description": "Approved application CC-2025-0003 for DevOps Engineer",
            "old_values": {"status_id": 2},
            "new_values": {"status_id": 3},
            "ip_address": "192.168.1.101",
            "user_agent": MAC_UA,
            "created_at": datetime(2025, 7, 28, 11, 0, tzinfo=timezone.utc),
        },
    ]
    return replace_rows(db, ActivityLog, rows)
