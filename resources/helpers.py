from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def field(obj: Any, name: str, default: Any = "") -> Any:
    """Read `name` from a mapping or an object. `None` and missing both yield `default`."""
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        value = obj.get(name)
    else:
        value = getattr(obj, name, None)
    return default if value is None else value


def text_field(obj: Any, name: str) -> str:
    value = field(obj, name, "")
    return "" if value is None else str(value)


def split_name(name: Any) -> tuple[str, str]:
    """
    Split a display name into (first_name, last_name).

    The first whitespace-separated token is the first name; the rest, joined by
    single spaces, is the last name. An empty name gives two empty strings.
    """
    parts = str(name or "").split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def username_from_email(email: Any) -> str:
    raw = str(email or "")
    local = raw.split("@", 1)[0]
    return local or raw


def user_identity(user: Any) -> dict:
    """Fields shared by the register and login `user` payloads."""
    email = text_field(user, "email")
    first_name, last_name = split_name(field(user, "name", ""))
    return {
        "id": text_field(user, "id"),
        "email": email,
        "username": username_from_email(email),
        "first_name": first_name,
        "last_name": last_name,
    }


def is_active(user: Any) -> bool:
    return text_field(user, "status") == "active"


def success_body(status: int, message: str, data: Any) -> dict:
    return {"status": status, "message": message, "data": data}


def error_body(status: int, message: str, error: Any, *, data: Any = None, details: Any = None) -> dict:
    body = {"status": status, "message": message, "error": error}
    if data:
        body["data"] = data
    if details is not None:
        body["details"] = details
    return body
