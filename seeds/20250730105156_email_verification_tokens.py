from __future__ import annotations

from datetime import datetime, timedelta, timezone

from models import EmailVerificationToken
from seeds.helpers import IPHONE_UA, LINUX_UA, MAC_UA, WINDOWS_UA, replace_rows, stamped
from utils import generate_uuids


MODEL = EmailVerificationToken

ISSUED_AT = datetime(2025, 7, 30, 10, 51, 56, tzinfo=timezone.utc)


def seed(db) -> int:
    tokens = generate_uuids(5)
    day = timedelta(hours=24)
    hour = timedelta(hours=1)
    rows = [
        {
            "id": 1,
            "token": tokens[0],
            "user_id": 1,
            "type": "email_verification",
            "is_used": False,
            "expires_at": ISSUED_AT + day,
            "used_at": None,
            "ip_address": "192.168.1.100",
            "user_agent": WINDOWS_UA,
        },
        {
            "id": 2,
            "token": tokens[1],
            "user_id": 2,
            "type": "email_verification",
            "is_used": True,
            "expires_at": ISSUED_AT + day,
            "used_at": ISSUED_AT + 2 * hour,
            "ip_address": "192.168.1.101",
            "user_agent": MAC_UA,
        },
        {
            "id": 3,
            "token": tokens[2],
            "user_id": 3,
            "type": "password_reset",
            "is_used": False,
            "expires_at": ISSUED_AT + hour,
            "used_at": None,
            "ip_address": "192.168.1.102",
            "user_agent": LINUX_UA,
        },
        {
            # already expired
            "id": 4,
            "token": tokens[3],
            "user_id": 4,
            "type": "email_verification",
            "is_used": False,
            "expires_at": ISSUED_AT - day,
            "used_at": None,
            "ip_address": "192.168.1.103",
            "user_agent": WINDOWS_UA,
        },
        {
            "id": 5,
            "token": tokens[4],
            "user_id": 5,
            "type": "password_reset",
            "is_used": True,
            "expires_at": ISSUED_AT + hour,
            "used_at": ISSUED_AT + timedelta(minutes=30),
            "ip_address": "192.168.1.104",
            "user_agent": IPHONE_UA,
        },
    ]
    return replace_rows(db, EmailVerificationToken, stamped(rows, at=ISSUED_AT))
