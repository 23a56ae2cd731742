from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from resources import format_login_response, format_refresh_token_response, format_register_response
from resources.email_verification_resource import (
    token_validation_error,
    verification_error_response,
    verification_success_response,
)
from resources.helpers import split_name, username_from_email
from resources.permission_resource import permission_in_use_error, permission_list_response
from resources.role_resource import (
    format_pagination,
    role_deleted_response,
    role_in_use_error,
    role_list_response,
    role_name_exists_error,
    role_not_found_error,
)
from resources.user_profile_resource import format_user_profile, profile_not_found
from resources.user_registration_resource import format_registration_success


def _user(**overrides):
    data = {
        "id": 7,
        "email": "siti.nurhaliza@ccp.com",
        "name": "Siti Nurhaliza",
        "status": "active",
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def test_register_response_shape():
    body = format_register_response(_user())
    assert body == {
        "user": {
            "id": "7",
            "email": "siti.nurhaliza@ccp.com",
            "username": "siti.nurhaliza",
            "first_name": "Siti",
            "last_name": "Nurhaliza",
            "is_active": True,
        }
    }


@pytest.mark.parametrize(
    "name,first,last",
    [
        ("A B C", "A", "B C"),
        ("A", "A", ""),
        ("", "", ""),
        ("  Budi   Santoso  ", "Budi", "Santoso"),
    ],
)
def test_name_splitting(name, first, last):
    assert split_name(name) == (first, last)
    user = format_register_response(_user(name=name))["user"]
    assert (user["first_name"], user["last_name"]) == (first, last)


def test_username_falls_back_to_full_email():
    assert username_from_email("local@domain.com") == "local"
    assert username_from_email("@domain.com") == "@domain.com"
    assert username_from_email(None) == ""


@pytest.mark.parametrize("status", ["inactive", "suspended", "", None])
def test_non_active_status_is_inactive(status):
    assert format_register_response(_user(status=status))["user"]["is_active"] is False


def test_missing_fields_degrade_to_empty_strings():
    body = format_register_response({})
    assert body["user"] == {
        "id": "",
        "email": "",
        "username": "",
        "first_name": "",
        "last_name": "",
        "is_active": False,
    }


def test_zero_id_renders_as_string():
    user = _user(id=0)
    assert format_register_response(user)["user"]["id"] == "0"
    assert format_login_response({}, user)["user"]["id"] == "0"


def test_login_response_takes_role_from_login_payload():
    login_data = {
        "user": {"role": "hr_staff"},
        "tokens": {"accessToken": "acc-1", "refreshToken": "ref-1"},
    }
    body = format_login_response(login_data, _user(status="inactive"))

    assert list(body["user"].keys()) == [
        "id",
        "email",
        "username",
        "first_name",
        "last_name",
        "role",
        "is_active",
    ]
    assert body["user"]["role"] == "hr_staff"
    assert body["user"]["is_active"] is False
    assert body["tokens"] == {"access_token": "acc-1", "refresh_token": "ref-1"}


def test_refresh_token_response_passes_expiry_through():
    tokens = SimpleNamespace(accessToken="a", refreshToken="r")
    assert format_refresh_token_response(tokens, "15m") == {
        "access_token": "a",
        "refresh_token": "r",
        "expires_in": "15m",
    }


def test_user_profile_renders_datetimes_as_iso_utc():
    created = datetime(2025, 7, 28, 21, 10, 30, tzinfo=timezone.utc)
    profile = format_user_profile(_user(uuid="u-1", role_id=3, created_at=created, updated_at=created))
    assert profile["created_at"] == "2025-07-28T21:10:30.000Z"
    assert profile["email_verified_at"] is None
    assert profile["role_id"] == 3

    body = profile_not_found(42)
    assert body["status"] == 404
    assert body["error"] == {"success": False, "error": "User profile not found", "user_id": 42}


def test_registration_success_carries_verification_token():
    body = format_registration_success(_user(uuid="u-1", role_id=3), verification_token="tok")
    assert body["status"] == 201
    assert body["data"]["verification_token"] == "tok"
    assert body["data"]["email"] == "siti.nurhaliza@ccp.com"


def test_email_verification_envelopes():
    at = datetime(2025, 7, 30, 12, 0, tzinfo=timezone.utc)
    ok = verification_success_response(5, at)
    assert ok == {
        "status": 200,
        "message": "Email verified successfully",
        "data": {"message": "Email verified successfully", "user_id": 5, "verified_at": "2025-07-30T12:00:00.000Z"},
    }

    err = verification_error_response("Token expired", 410)
    assert err["status"] == 410
    assert err["error"] == {"success": False, "error": "Token expired"}

    assert token_validation_error("bad") == {"success": False, "error": "bad"}
    assert token_validation_error("bad", token="t")["token"] == "t"


def test_role_list_and_errors():
    perm = {"id": 1, "name": "users.view", "description": "View user accounts"}
    role = {"id": 1, "name": "super_admin", "display_name": "Super Admin", "permissions": [perm]}
    pagination = {"page": 1, "limit": 10, "total": 1, "totalPages": 1, "hasNext": False, "hasPrev": False}

    body, status = role_list_response([role], pagination)
    assert status == 200
    assert body["data"]["roles"][0]["permissions"][0]["name"] == "users.view"
    assert body["data"]["roles"][0]["users_count"] == 0
    assert body["data"]["pagination"] == format_pagination(pagination)

    assert role_not_found_error(9) == (
        {"status": 404, "message": "Role with ID 9 not found", "error": "ROLE_NOT_FOUND"},
        404,
    )
    assert role_name_exists_error("hr_staff")[1] == 409

    body, status = role_in_use_error(3, 8)
    assert status == 400
    assert body["error"] == "ROLE_IN_USE"
    assert body["data"] == {"role_id": 3, "users_assigned": 8}

    assert role_deleted_response(3)[0]["data"] == {"role_id": 3, "deleted": True}


def test_permission_responses():
    body, status = permission_list_response([{"id": 2, "name": "users.create"}])
    assert status == 200
    assert body["data"]["permissions"][0]["id"] == 2

    body, status = permission_in_use_error(4, 2)
    assert status == 400
    assert body["error"] == "PERMISSION_IN_USE"
    assert body["data"] == {"permission_id": 4, "roles_assigned": 2}
