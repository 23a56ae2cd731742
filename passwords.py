from __future__ import annotations

import re

from werkzeug.security import check_password_hash, generate_password_hash

from utils import ApiError


MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
SCRYPT_SALT_LENGTH = 16

_CHARACTER_CLASSES = (
    ("uppercase", re.compile(r"[A-Z]")),
    ("lowercase", re.compile(r"[a-z]")),
    ("number", re.compile(r"\d")),
    ("special character", re.compile(r"[^A-Za-z0-9]")),
)


def missing_character_classes(password: str) -> list[str]:
    return [label for label, pattern in _CHARACTER_CLASSES if not pattern.search(password)]


def validate_password_policy(password: str) -> str:
    """
    Return the password if it satisfies the account policy.

    Raises `ApiError("VALIDATION_ERROR")` naming the first rule that fails.
    """
    pwd = str(password or "")
    if not pwd:
        raise ApiError("VALIDATION_ERROR", "Password is required")
    if not MIN_PASSWORD_LENGTH <= len(pwd) <= MAX_PASSWORD_LENGTH:
        raise ApiError(
            "VALIDATION_ERROR",
            f"Password must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH} characters",
        )
    missing = missing_character_classes(pwd)
    if missing:
        raise ApiError("VALIDATION_ERROR", f"Password must include: {', '.join(missing)}")
    return pwd


def hash_password(password: str) -> str:
    return generate_password_hash(validate_password_policy(password), method="scrypt", salt_length=SCRYPT_SALT_LENGTH)


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    return check_password_hash(str(password_hash), str(password or ""))
