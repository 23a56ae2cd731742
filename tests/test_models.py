from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from db import SessionLocal
from models import Candidate, EmailNotification, EmailVerificationToken, RelatedRef, RelatedType


def test_notification_marks_sent_once():
    n = EmailNotification(recipient_email="a@b.c", subject="s", body="b", status="pending", attempts=0)
    at = datetime(2025, 7, 28, 9, 0, tzinfo=timezone.utc)

    n.mark_sent(at)

    assert n.status == "sent"
    assert n.sent_at == at
    assert n.attempts == 1
    with pytest.raises(ValueError):
        n.mark_failed("smtp down")


def test_notification_failed_and_bounced_only_from_pending():
    failed = EmailNotification(status="pending", attempts=0)
    failed.mark_failed("mailbox full")
    assert (failed.status, failed.failed_reason, failed.attempts) == ("failed", "mailbox full", 1)

    bounced = EmailNotification(status="pending", attempts=0)
    bounced.mark_bounced()
    assert bounced.status == "bounced"
    with pytest.raises(ValueError):
        bounced.mark_sent()


def test_notification_related_reference():
    n = EmailNotification()
    assert n.related is None

    n.related = RelatedRef(RelatedType.APPLICATION, 4)
    assert (n.related_type, n.related_id) == ("application", 4)
    assert n.related == RelatedRef(RelatedType.APPLICATION, 4)

    n.related = None
    assert n.related_type is None


def test_verification_token_lifecycle():
    issued = datetime(2025, 7, 30, 10, 51, 56, tzinfo=timezone.utc)
    token = EmailVerificationToken(token="t", user_id=1, is_used=False, expires_at=issued + timedelta(hours=1))

    assert token.is_expired(issued) is False
    assert token.is_expired(issued + timedelta(hours=2)) is True

    token.mark_used(issued + timedelta(minutes=5))
    assert token.is_used is True
    assert token.used_at == issued + timedelta(minutes=5)
    with pytest.raises(ValueError):
        token.mark_used()


def test_soft_delete_keeps_row(migrated):
    with SessionLocal() as db:
        db.add(Candidate(uuid="c-1", email="x@email.com", full_name="X Y"))
        db.commit()

        cand = db.scalars(select(Candidate)).one()
        assert cand.is_deleted is False
        cand.soft_delete()
        db.commit()

        cand = db.scalars(select(Candidate)).one()
        assert cand.is_deleted is True
        assert cand.created_at is not None
