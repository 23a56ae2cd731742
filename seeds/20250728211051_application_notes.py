from __future__ import annotations

from models import ApplicationNote
from seeds.helpers import replace_rows, stamped


MODEL = ApplicationNote


def seed(db) -> int:
    rows = [
        {
            "application_id": 1,
            "user_id": 3,
            "note": "Strong technical skills in Go and Python. Good fit for the team.",
            "is_internal": True,
        },
        {
            "application_id": 2,
            "user_id": 3,
            "note": "Excellent portfolio. Lacks experience with our specific tech stack, but a fast learner.",
            "is_internal": True,
        },
        {
            "application_id": 4,
            "user_id": 4,
            "note": (
                "Portfolio is outstanding, but communication skills during initial screening were weak. "
                "Rejecting for now."
            ),
            "is_internal": True,
        },
        {
            "application_id": 7,
            "user_id": 2,
            "note": "Candidate has been approved for another role (DevOps). This application can be closed.",
            "is_internal": False,
        },
    ]
    return replace_rows(db, ApplicationNote, stamped(rows))
