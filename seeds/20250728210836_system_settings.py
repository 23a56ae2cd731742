from __future__ import annotations

from models import SystemSetting
from seeds.helpers import replace_rows, stamped


MODEL = SystemSetting


def seed(db) -> int:
    # Values are stored as text; `type` says how readers should parse them.
    rows = [
        {
            "key": "site_name",
            "value": "Candidate Careers Platform",
            "type": "string",
            "description": "The public name of the website.",
            "is_public": True,
        },
        {
            "key": "site_logo_url",
            "value": "/path/to/logo.png",
            "type": "string",
            "description": "URL for the main site logo.",
            "is_public": True,
        },
        {
            "key": "maintenance_mode",
            "value": "false",
            "type": "boolean",
            "description": "Puts the site in maintenance mode.",
            "is_public": False,
        },
        {
            "key": "max_applications_per_user",
            "value": "3",
            "type": "integer",
            "description": "Maximum active applications a candidate can have.",
            "is_public": False,
        },
        {
            "key": "allow_new_registrations",
            "value": "true",
            "type": "boolean",
            "description": "Allow new users to register.",
            "is_public": False,
        },
    ]
    return replace_rows(db, SystemSetting, stamped(rows))
