from __future__ import annotations

from typing import Any

from resources.helpers import field, is_active, user_identity


def format_login_response(login_data: Any, user: Any) -> dict:
    """
    Shape a successful login.

    `role` is taken from the login payload's user (the token issuer's view),
    not from the stored user row. Tokens are re-keyed from camelCase.
    """
    tokens = field(login_data, "tokens", None)
    return {
        "user": {
            **user_identity(user),
            "role": field(field(login_data, "user", None), "role"),
            "is_active": is_active(user),
        },
        "tokens": {
            "access_token": field(tokens, "accessToken"),
            "refresh_token": field(tokens, "refreshToken"),
        },
    }
