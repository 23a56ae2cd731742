from __future__ import annotations

from typing import Any, Iterable

from resources.helpers import error_body, field, success_body
from utils import to_iso_utc


def format_permission(permission: Any) -> dict:
    return {
        "id": field(permission, "id", None),
        "name": field(permission, "name"),
        "description": field(permission, "description", None),
        "created_at": to_iso_utc(field(permission, "created_at", None)),
        "updated_at": to_iso_utc(field(permission, "updated_at", None)),
    }


def format_permissions(permissions: Iterable[Any] | None) -> list[dict]:
    return [format_permission(p) for p in (permissions or [])]


def permission_list_response(permissions, message: str = "Permissions retrieved successfully"):
    return success_body(200, message, {"permissions": format_permissions(permissions)}), 200


def permission_created_response(permission, message: str = "Permission created successfully"):
    return success_body(201, message, {"permission": format_permission(permission)}), 201


def permission_updated_response(permission, message: str = "Permission updated successfully"):
    return success_body(200, message, {"permission": format_permission(permission)}), 200


def permission_deleted_response(permission_id, message: str = "Permission deleted successfully"):
    return success_body(200, message, {"permission_id": permission_id, "deleted": True}), 200


def permission_check_response(has_permission: bool, permission: str, user_id, message: str | None = None):
    data = {"has_permission": bool(has_permission), "permission": permission, "user_id": user_id}
    return success_body(200, message or "Permission check completed", data), 200


def permission_assignment_response(role_id, permissions, action: str, message: str = "Permissions assigned successfully"):
    formatted = format_permissions(permissions)
    data = {"role_id": role_id, "permissions": formatted, "action": action, "assigned_count": len(formatted)}
    return success_body(200, message, data), 200


def permission_removal_response(role_id, removed: list[str], message: str = "Permissions removed successfully"):
    data = {"role_id": role_id, "removed_permissions": list(removed), "removed_count": len(removed)}
    return success_body(200, message, data), 200


def permission_not_found_error(permission_id):
    return error_body(404, f"Permission with ID {permission_id} not found", "PERMISSION_NOT_FOUND"), 404


def permission_name_exists_error(name: str):
    return error_body(409, f"Permission with name '{name}' already exists", "PERMISSION_NAME_EXISTS"), 409


def permission_in_use_error(permission_id, role_count: int):
    message = (
        f"Cannot delete permission with ID {permission_id}. "
        f"It is currently assigned to {role_count} role(s)."
    )
    data = {"permission_id": permission_id, "roles_assigned": role_count}
    return error_body(400, message, "PERMISSION_IN_USE", data=data), 400


def permission_check_error(permission: str, error: str):
    return error_body(400, f"Failed to check permission '{permission}': {error}", "PERMISSION_CHECK_ERROR"), 400


def validation_error(details: Any):
    return error_body(400, "Validation error", "VALIDATION_ERROR", details=details), 400


def error_response(status: int, message: str, code: str, details: Any = None):
    return error_body(status, message, code, data=details), status
