from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from resources.helpers import field, success_body
from utils import to_iso_utc


def format_user_profile(user: Any) -> dict:
    return {
        "id": field(user, "id", None),
        "uuid": field(user, "uuid"),
        "email": field(user, "email"),
        "name": field(user, "name"),
        "role_id": field(user, "role_id", None),
        "status": field(user, "status"),
        "email_verified_at": to_iso_utc(field(user, "email_verified_at", None)),
        "last_login_at": to_iso_utc(field(user, "last_login_at", None)),
        "created_at": to_iso_utc(field(user, "created_at", None)),
        "updated_at": to_iso_utc(field(user, "updated_at", None)),
    }


def _failure(status: int, message: str, **extra) -> dict:
    return {"status": status, "message": message, "error": {"success": False, "error": message, **extra}}


def profile_view_success(user: Any) -> dict:
    return success_body(200, "User profile retrieved successfully", format_user_profile(user))


def profile_update_success(user: Any) -> dict:
    return success_body(200, "Profile updated successfully", format_user_profile(user))


def profile_update_error(error: str, status: int = 400) -> dict:
    return _failure(status, error)


def profile_not_found(user_id: Any) -> dict:
    return _failure(404, "User profile not found", user_id=user_id)


def unauthorized_profile() -> dict:
    return _failure(403, "Unauthorized to access this profile")


def password_change_success(user: Any, changed_at: datetime | None = None) -> dict:
    data = format_user_profile(user)
    data["password_changed_at"] = to_iso_utc(changed_at or datetime.now(timezone.utc))
    return success_body(200, "Password changed successfully", data)


def password_change_error(error: str) -> dict:
    return _failure(400, error)
