from __future__ import annotations

from models import Application
from seeds.helpers import replace_rows, stamped


MODEL = Application

PENDING, UNDER_REVIEW, APPROVED, REJECTED = 1, 2, 3, 4

# (job_posting_id, candidate_id, status_id)
APPLICATIONS = [
    (1, 1, UNDER_REVIEW),
    (1, 2, UNDER_REVIEW),
    (6, 1, APPROVED),
    (4, 3, REJECTED),
    (3, 4, PENDING),
    (3, 5, PENDING),
    (5, 8, UNDER_REVIEW),
    (9, 6, APPROVED),
    (2, 7, PENDING),
    (10, 2, UNDER_REVIEW),
]


def seed(db) -> int:
    rows = [
        {
            "id": n,
            "uuid": f"550e8400-e29b-41d4-a716-4466554400{n:02d}",
            "job_posting_id": job_posting_id,
            "candidate_id": candidate_id,
            "application_number": f"APP-2025-{n:03d}",
            "status_id": status_id,
        }
        for n, (job_posting_id, candidate_id, status_id) in enumerate(APPLICATIONS, start=1)
    ]
    return replace_rows(db, Application, stamped(rows))
