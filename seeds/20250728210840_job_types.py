from __future__ import annotations

from models import JobType
from seeds.helpers import replace_rows, stamped


MODEL = JobType
NAMES = ["Internship", "Staff", "Freelance", "Contract"]


def seed(db) -> int:
    rows = [{"id": idx, "name": name} for idx, name in enumerate(NAMES, start=1)]
    return replace_rows(db, JobType, stamped(rows))
