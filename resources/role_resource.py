"""
Role management response bodies.

Every `*_response` / `*_error` function returns `(body, http_status)` so a
Flask view can return it directly.
"""
from __future__ import annotations

from typing import Any

from resources.helpers import error_body, field, success_body
from resources.permission_resource import format_permissions
from utils import to_iso_utc


def format_role(role: Any) -> dict:
    return {
        "id": field(role, "id", None),
        "name": field(role, "name"),
        "display_name": field(role, "display_name"),
        "description": field(role, "description", None),
        "permissions": format_permissions(field(role, "permissions", None)),
        "users_count": int(field(role, "users_count", 0) or 0),
        "created_at": to_iso_utc(field(role, "created_at", None)),
        "updated_at": to_iso_utc(field(role, "updated_at", None)),
    }


def format_role_summary(role: Any) -> dict:
    out = format_role(role)
    out.pop("permissions")
    out.pop("users_count")
    return out


def format_pagination(pagination: Any) -> dict:
    return {
        "page": field(pagination, "page", None),
        "limit": field(pagination, "limit", None),
        "total": field(pagination, "total", None),
        "totalPages": field(pagination, "totalPages", None),
        "hasNext": bool(field(pagination, "hasNext", False)),
        "hasPrev": bool(field(pagination, "hasPrev", False)),
    }


def role_list_response(roles, pagination, message: str = "Roles retrieved successfully"):
    data = {"roles": [format_role(r) for r in roles or []], "pagination": format_pagination(pagination)}
    return success_body(200, message, data), 200


def single_role_response(role, message: str = "Role retrieved successfully"):
    return success_body(200, message, {"role": format_role(role)}), 200


def role_created_response(role, message: str = "Role created successfully"):
    return success_body(201, message, {"role": format_role(role)}), 201


def role_updated_response(role, message: str = "Role updated successfully"):
    return success_body(200, message, {"role": format_role(role)}), 200


def role_deleted_response(role_id, message: str = "Role deleted successfully"):
    return success_body(200, message, {"role_id": role_id, "deleted": True}), 200


def role_not_found_error(role_id):
    return error_body(404, f"Role with ID {role_id} not found", "ROLE_NOT_FOUND"), 404


def role_name_exists_error(name: str):
    return error_body(409, f"Role with name '{name}' already exists", "ROLE_NAME_EXISTS"), 409


def role_in_use_error(role_id, user_count: int):
    message = (
        f"Cannot delete role with ID {role_id}. "
        f"{user_count} user(s) are currently assigned to this role."
    )
    data = {"role_id": role_id, "users_assigned": user_count}
    return error_body(400, message, "ROLE_IN_USE", data=data), 400


def permission_not_found_error(permission_name: str):
    return error_body(404, f"Permission '{permission_name}' not found", "PERMISSION_NOT_FOUND"), 404
