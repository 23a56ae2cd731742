"""
Staff accounts.

Every seeded account shares one password (`SEED_DEFAULT_PASSWORD`); change it on first login.
"""
from __future__ import annotations

from config import get_config
from models import User
from passwords import hash_password
from seeds.helpers import replace_rows, stamped
from utils import generate_uuids


MODEL = User

SUPER_ADMIN, HEAD_OF_HR, HR_STAFF = 1, 2, 3

# (email, name, role_id, status)
USERS = [
    ("admin@ccp.com", "Admin User", SUPER_ADMIN, "active"),
    ("head.hr@ccp.com", "Budi Santoso", HEAD_OF_HR, "active"),
    ("siti.nurhaliza@ccp.com", "Siti Nurhaliza", HR_STAFF, "active"),
    ("agus.wijaya@ccp.com", "Agus Wijaya", HR_STAFF, "active"),
    ("dewi.lestari@ccp.com", "Dewi Lestari", HR_STAFF, "active"),
    ("eko.prasetyo@ccp.com", "Eko Prasetyo", HR_STAFF, "active"),
    ("fitri.rahmawati@ccp.com", "Fitri Rahmawati", HR_STAFF, "inactive"),
    ("gunawan.amir@ccp.com", "Gunawan Amir", HR_STAFF, "active"),
    ("herman.syah@ccp.com", "Herman Syah", HR_STAFF, "active"),
    ("indah.sari@ccp.com", "Indah Sari", HR_STAFF, "active"),
]


def seed(db) -> int:
    hashed = hash_password(get_config().SEED_DEFAULT_PASSWORD)
    uuids = generate_uuids(len(USERS))
    rows = [
        {
            "id": idx + 1,
            "uuid": uuids[idx],
            "email": email,
            "password": hashed,
            "name": name,
            "role_id": role_id,
            "status": status,
        }
        for idx, (email, name, role_id, status) in enumerate(USERS)
    ]
    return replace_rows(db, User, stamped(rows))
