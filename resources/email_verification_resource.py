from __future__ import annotations

from datetime import datetime
from typing import Any

from resources.helpers import success_body
from utils import to_iso_utc


VERIFIED = "Email verified successfully"
RESENT = "Verification email sent successfully"


def verification_success(user_id: Any, verified_at: datetime, message: str = VERIFIED) -> dict:
    return {"message": message, "user_id": user_id, "verified_at": to_iso_utc(verified_at)}


def verification_error(error: str, user_id: Any = None) -> dict:
    out: dict = {"success": False, "error": error}
    if user_id is not None:
        out["user_id"] = user_id
    return out


def resend_verification(email: str, expires_at: datetime, message: str = RESENT) -> dict:
    return {"message": message, "email": email, "expires_at": to_iso_utc(expires_at)}


def token_validation_error(error: str, token: str | None = None) -> dict:
    out: dict = {"success": False, "error": error}
    if token is not None:
        out["token"] = token
    return out


def verification_success_response(user_id: Any, verified_at: datetime, message: str = VERIFIED) -> dict:
    return success_body(200, message, verification_success(user_id, verified_at, message))


def resend_verification_success_response(email: str, expires_at: datetime, message: str = RESENT) -> dict:
    return success_body(200, message, resend_verification(email, expires_at, message))


def verification_error_response(error: str, status: int = 400, user_id: Any = None) -> dict:
    return {"status": status, "message": error, "error": verification_error(error, user_id)}
