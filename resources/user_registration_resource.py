from __future__ import annotations

from datetime import datetime
from typing import Any

from resources.helpers import field, success_body
from resources.user_profile_resource import format_user_profile
from utils import to_iso_utc


def format_registration(user: Any) -> dict:
    return {
        "id": field(user, "id", None),
        "uuid": field(user, "uuid"),
        "email": field(user, "email"),
        "name": field(user, "name"),
        "role_id": field(user, "role_id", None),
        "status": field(user, "status"),
        "email_verified_at": to_iso_utc(field(user, "email_verified_at", None)),
        "created_at": to_iso_utc(field(user, "created_at", None)),
    }


def format_registration_success(user: Any, verification_token: str | None = None) -> dict:
    data = format_registration(user)
    data["verification_token"] = verification_token
    return success_body(201, "User registered successfully. Verification email sent.", data)


def format_profile_update_success(user: Any) -> dict:
    return success_body(200, "Profile updated successfully", format_user_profile(user))


def format_resend_verification_success(email: str, expires_at: datetime) -> dict:
    message = "Verification email sent successfully"
    return success_body(200, message, {"message": message, "email": email, "expires_at": to_iso_utc(expires_at)})
