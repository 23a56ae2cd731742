from __future__ import annotations

from models import ApplicationStatus
from seeds.helpers import replace_rows, stamped


MODEL = ApplicationStatus

# Order matters: status ids 1-4 are referenced by the applications loader.
NAMES = ["Pending", "Under Review", "Approved", "Rejected"]


def seed(db) -> int:
    rows = [{"id": idx, "name": name} for idx, name in enumerate(NAMES, start=1)]
    return replace_rows(db, ApplicationStatus, stamped(rows))
