from __future__ import annotations

from datetime import datetime, timezone

from models import PasswordResetToken
from seeds.helpers import replace_rows


MODEL = PasswordResetToken


def seed(db) -> int:
    rows = [
        {
            "email": "fitri.rahmawati@ccp.com",
            "token": "reset_token_fitri_123456",
            "created_at": datetime(2025, 7, 28, 15, 0, tzinfo=timezone.utc),
        },
        {
            "email": "agus.wijaya@ccp.com",
            "token": "reset_token_agus_789012",
            "created_at": datetime(2025, 7, 28, 16, 30, tzinfo=timezone.utc),
        },
        {
            "email": "dewi.lestari@ccp.com",
            "token": "reset_token_dewi_345678",
            "created_at": datetime(2025, 7, 28, 17, 45, tzinfo=timezone.utc),
        },
    ]
    return replace_rows(db, PasswordResetToken, rows)
