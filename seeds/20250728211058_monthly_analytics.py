from __future__ import annotations

from decimal import Decimal

from models import MonthlyAnalytics
from seeds.helpers import replace_rows, stamped


MODEL = MonthlyAnalytics


def seed(db) -> int:
    rows = [
        {
            "year": 2025,
            "month": 6,
            "total_job_postings": 8,
            "total_applications": 15,
            "total_approved_applications": 3,
            "total_rejected_applications": 2,
            "total_job_views": 125,
            "avg_applications_per_job": Decimal("1.88"),
            "top_department_id": 1,
            "top_job_category_id": 1,
        },
        {
            "year": 2025,
            "month": 7,
            "total_job_postings": 10,
            "total_applications": 10,
            "total_approved_applications": 2,
            "total_rejected_applications": 1,
            "total_job_views": 89,
            "avg_applications_per_job": Decimal("1.00"),
            "top_department_id": 1,
            "top_job_category_id": 1,
        },
    ]
    return replace_rows(db, MonthlyAnalytics, stamped(rows))
