from __future__ import annotations

from typing import Any

from resources.helpers import field, is_active, user_identity


def format_register_response(user: Any) -> dict:
    return {"user": {**user_identity(user), "is_active": is_active(user)}}


def format_refresh_token_response(tokens: Any, expires_in: Any) -> dict:
    return {
        "access_token": field(tokens, "accessToken"),
        "refresh_token": field(tokens, "refreshToken"),
        "expires_in": expires_in,
    }
