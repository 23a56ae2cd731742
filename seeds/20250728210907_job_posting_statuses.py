from __future__ import annotations

from models import JobPostingStatus
from seeds.helpers import replace_rows, stamped


MODEL = JobPostingStatus
NAMES = ["Draft", "Published", "Closed", "Archived"]


def seed(db) -> int:
    rows = [{"id": idx, "name": name} for idx, name in enumerate(NAMES, start=1)]
    return replace_rows(db, JobPostingStatus, stamped(rows))
