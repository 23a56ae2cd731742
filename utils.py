from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any


class ApiError(Exception):
    def __init__(self, code: str, message: str, *, http_status: int = 400):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status


def iso_utc_now() -> str:
    return to_iso_utc(datetime.now(timezone.utc))


def to_iso_utc(value: Any) -> str | None:
    """
    Render a datetime as ISO-8601 UTC with millisecond precision and a `Z` suffix.

    Naive datetimes are assumed to already be UTC. `None` passes through.
    """
    if value is None:
        return None
    if not isinstance(value, datetime):
        return str(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def new_uuid() -> str:
    return str(uuid.uuid4())


def generate_uuids(count: int) -> list[str]:
    return [new_uuid() for _ in range(max(0, int(count)))]
