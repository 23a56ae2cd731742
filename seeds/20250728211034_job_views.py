from __future__ import annotations

from datetime import datetime, timezone

from models import JobView
from seeds.helpers import MAC_UA, WINDOWS_UA, replace_rows


MODEL = JobView

# (job_posting_id, ip_address, user_agent, referrer, hour, minute)
VIEWS = [
    (1, "192.168.1.200", WINDOWS_UA, "https://www.google.com/search?q=backend+engineer+jobs", 9, 0),
    (1, "192.168.1.201", MAC_UA, "https://www.linkedin.com/jobs/", 10, 30),
    (3, "192.168.1.202", WINDOWS_UA, "https://www.indeed.com/", 11, 15),
    (4, "192.168.1.203", MAC_UA, "https://www.behance.net/", 14, 20),
    (6, "192.168.1.204", WINDOWS_UA, "https://www.stackoverflow.com/jobs/", 15, 45),
]


def seed(db) -> int:
    rows = [
        {
            "job_posting_id": job_posting_id,
            "ip_address": ip_address,
            "user_agent": user_agent,
            "referrer": referrer,
            "session_id": f"session_candidate_{n:03d}",
            "viewed_at": datetime(2025, 7, 28, hour, minute, tzinfo=timezone.utc),
        }
        for n, (job_posting_id, ip_address, user_agent, referrer, hour, minute) in enumerate(VIEWS, start=1)
    ]
    return replace_rows(db, JobView, rows)
