from __future__ import annotations

from models import JobCategory
from seeds.helpers import replace_rows, stamped


MODEL = JobCategory


def seed(db) -> int:
    categories = [
        ("Technology", "technology"),
        ("Marketing", "marketing"),
        ("Human Resources", "human-resources"),
        ("Finance", "finance"),
        ("Design", "design"),
    ]
    rows = [
        {"id": idx, "name": name, "slug": slug, "status": "active"}
        for idx, (name, slug) in enumerate(categories, start=1)
    ]
    return replace_rows(db, JobCategory, stamped(rows))
