from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from passwords import hash_password, validate_password_policy, verify_password
from utils import ApiError, generate_uuids, to_iso_utc


def test_hash_and_verify():
    h = hash_password("SecurePass123!")
    assert h.startswith("scrypt:")
    assert verify_password("SecurePass123!", h)
    assert not verify_password("SecurePass123?", h)
    assert not verify_password("SecurePass123!", "")


@pytest.mark.parametrize("pwd", ["", "Sh0rt!", "alllowercase1!", "NoDigits!!", "NoSpecial123", "x" * 129])
def test_policy_rejects(pwd):
    with pytest.raises(ApiError) as exc:
        validate_password_policy(pwd)
    assert exc.value.code == "VALIDATION_ERROR"
    assert exc.value.http_status == 400


def test_generate_uuids_are_distinct():
    ids = generate_uuids(5)
    assert len(ids) == 5
    assert len(set(ids)) == 5
    assert generate_uuids(0) == []


def test_to_iso_utc():
    assert to_iso_utc(None) is None
    assert to_iso_utc(datetime(2025, 7, 28, 21, 10, 30)) == "2025-07-28T21:10:30.000Z"
    wib = timezone(timedelta(hours=7))
    assert to_iso_utc(datetime(2025, 7, 29, 4, 10, 30, 250000, tzinfo=wib)) == "2025-07-28T21:10:30.250Z"


def test_policy_names_missing_classes():
    with pytest.raises(ApiError) as exc:
        validate_password_policy("lowercaseonly")
    assert exc.value.message == "Password must include: uppercase, number, special character"
