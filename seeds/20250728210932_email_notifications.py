from __future__ import annotations

from datetime import datetime, timezone

from models import EmailNotification, RelatedType
from seeds.helpers import replace_rows, stamped


MODEL = EmailNotification


def seed(db) -> int:
    application = RelatedType.APPLICATION.value
    rows = [
        {
            "recipient_email": "ahmad.fauzi@email.com",
            "subject": "Application Received - Senior Backend Engineer",
            "body": (
                "Thank you for your application to the Senior Backend Engineer position. "
                "We have received your application and will review it shortly."
            ),
            "related_type": application,
            "related_id": 1,
            "status": "sent",
            "sent_at": datetime(2025, 7, 28, 9, 0, tzinfo=timezone.utc),
            "attempts": 1,
        },
        {
            "recipient_email": "riri.aprilia@email.com",
            "subject": "Application Under Review - Senior Backend Engineer",
            "body": (
                "Your application for the Senior Backend Engineer position is currently under review. "
                "We will contact you soon with an update."
            ),
            "related_type": application,
            "related_id": 2,
            "status": "sent",
            "sent_at": datetime(2025, 7, 28, 10, 30, tzinfo=timezone.utc),
            "attempts": 1,
        },
        {
            "recipient_email": "chandra.putra@email.com",
            "subject": "Application Status Update - UI/UX Designer",
            "body": (
                "Thank you for your application. After careful review, we regret to inform you "
                "that we will not be moving forward with your application at this time."
            ),
            "related_type": application,
            "related_id": 4,
            "status": "sent",
            "sent_at": datetime(2025, 7, 27, 16, 0, tzinfo=timezone.utc),
            "attempts": 1,
        },
    ]
    return replace_rows(db, EmailNotification, stamped(rows))
