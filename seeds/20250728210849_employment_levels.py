from __future__ import annotations

from models import EmploymentLevel
from seeds.helpers import replace_rows, stamped


MODEL = EmploymentLevel
NAMES = ["Entry", "Junior", "Mid", "Senior", "Lead", "Head"]


def seed(db) -> int:
    rows = [{"id": idx, "name": name} for idx, name in enumerate(NAMES, start=1)]
    return replace_rows(db, EmploymentLevel, stamped(rows))
