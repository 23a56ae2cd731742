from __future__ import annotations

import time

from models import Session
from seeds.helpers import MAC_UA, WINDOWS_UA, replace_rows


MODEL = Session


def seed(db) -> int:
    # last_activity is epoch seconds relative to load time.
    now = int(time.time())
    rows = [
        {
            "id": "session_admin_001",
            "user_id": 1,
            "ip_address": "192.168.1.100",
            "user_agent": WINDOWS_UA,
            "payload": '{"user_id": 1, "role": "super_admin"}',
            "last_activity": now,
        },
        {
            "id": "session_hr_head_001",
            "user_id": 2,
            "ip_address": "192.168.1.101",
            "user_agent": MAC_UA,
            "payload": '{"user_id": 2, "role": "head_of_hr"}',
            "last_activity": now - 3600,
        },
        {
            "id": "session_hr_staff_001",
            "user_id": 3,
            "ip_address": "192.168.1.102",
            "user_agent": WINDOWS_UA,
            "payload": '{"user_id": 3, "role": "hr_staff"}',
            "last_activity": now - 7200,
        },
    ]
    return replace_rows(db, Session, rows)
