from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import NamedTuple

from sqlalchemy import (
    JSON,
    BigInteger,
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from db import Base


class RelatedType(str, enum.Enum):
    """Kinds of rows a polymorphic (type, id) column pair may point at."""

    APPLICATION = "application"
    JOB_POSTING = "job_posting"
    CANDIDATE = "candidate"
    USER = "user"
    DEPARTMENT = "department"


class RelatedRef(NamedTuple):
    kind: RelatedType
    id: int


def _to_related_ref(kind, ref_id) -> RelatedRef | None:
    if kind is None or ref_id is None:
        return None
    return RelatedRef(RelatedType(kind), int(ref_id))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow, server_default=func.now()
    )


class SoftDeleteMixin:
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self, at: datetime | None = None) -> None:
        if self.deleted_at is None:
            self.deleted_at = at or _utcnow()


class Role(TimestampMixin, Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    display_name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)

    permissions = relationship("Permission", secondary="role_permissions", back_populates="roles", lazy="selectin")
    users = relationship("User", back_populates="role")


class Permission(TimestampMixin, Base):
    __tablename__ = "permissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)

    roles = relationship("Role", secondary="role_permissions", back_populates="permissions")


class RolePermission(Base):
    __tablename__ = "role_permissions"

    role_id = Column(BigInteger, ForeignKey("roles.id", ondelete="CASCADE", onupdate="CASCADE"), primary_key=True)
    permission_id = Column(
        BigInteger, ForeignKey("permissions.id", ondelete="CASCADE", onupdate="CASCADE"), primary_key=True
    )


class JobCategory(TimestampMixin, Base):
    __tablename__ = "job_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    status = Column(Enum("active", "inactive", name="job_category_status"), default="active")


class SystemSetting(TimestampMixin, Base):
    __tablename__ = "system_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(100), nullable=False, unique=True)
    value = Column(Text, nullable=True)
    type = Column(Enum("string", "integer", "boolean", "json", "text", name="system_setting_type"), default="string")
    description = Column(Text, nullable=True)
    is_public = Column(Boolean, default=False)


class JobType(TimestampMixin, Base):
    __tablename__ = "job_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)


class EmploymentLevel(TimestampMixin, Base):
    __tablename__ = "employment_levels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)


class JobPostingStatus(TimestampMixin, Base):
    __tablename__ = "job_posting_statuses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)


class ApplicationStatus(TimestampMixin, Base):
    __tablename__ = "application_statuses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)


class Candidate(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "candidates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(String(36), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    full_name = Column(String(255), nullable=False)
    domicile = Column(String(255), nullable=True)
    university = Column(String(255), nullable=True)
    major = Column(String(255), nullable=True)
    semester = Column(String(10), nullable=True)
    instagram_url = Column(String(500), nullable=True)
    whatsapp_number = Column(String(20), nullable=True, unique=True)


class EmailNotification(TimestampMixin, Base):
    """
    Outbound email record.

    Status flow: pending -> sent | failed | bounced (application-level only;
    the column itself accepts any of the four values).
    """

    __tablename__ = "email_notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    recipient_email = Column(String(255), nullable=False)
    subject = Column(String(500), nullable=False)
    body = Column(Text, nullable=False)
    related_type = Column(String(100), nullable=True)
    related_id = Column(BigInteger, nullable=True)
    status = Column(Enum("pending", "sent", "failed", "bounced", name="email_notification_status"), default="pending")
    sent_at = Column(DateTime(timezone=True), nullable=True)
    failed_reason = Column(Text, nullable=True)
    attempts = Column(Integer, default=0)

    @property
    def related(self) -> RelatedRef | None:
        return _to_related_ref(self.related_type, self.related_id)

    @related.setter
    def related(self, ref: RelatedRef | None) -> None:
        if ref is None:
            self.related_type = None
            self.related_id = None
            return
        self.related_type = RelatedType(ref.kind).value
        self.related_id = int(ref.id)

    def _require_pending(self, target: str) -> None:
        current = self.status or "pending"
        if current != "pending":
            raise ValueError(f"Cannot move notification from {current} to {target}")

    def mark_sent(self, at: datetime | None = None) -> None:
        self._require_pending("sent")
        self.status = "sent"
        self.sent_at = at or _utcnow()
        self.attempts = int(self.attempts or 0) + 1

    def mark_failed(self, reason: str) -> None:
        self._require_pending("failed")
        self.status = "failed"
        self.failed_reason = str(reason or "")
        self.attempts = int(self.attempts or 0) + 1

    def mark_bounced(self) -> None:
        self._require_pending("bounced")
        self.status = "bounced"


class User(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(String(36), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role_id = Column(BigInteger, ForeignKey("roles.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=True)
    status = Column(Enum("active", "inactive", "suspended", name="user_status"), default="active")
    email_verified_at = Column(DateTime(timezone=True), nullable=True)
    last_login_at = Column(DateTime(timezone=True), nullable=True)

    role = relationship("Role", back_populates="users")


class Department(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(Enum("active", "inactive", name="department_status"), default="active")
    created_by = Column(BigInteger, ForeignKey("users.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False)


class PasswordResetToken(Base):
    __tablename__ = "password_reset_tokens"

    email = Column(String(255), ForeignKey("users.email", ondelete="CASCADE", onupdate="CASCADE"), primary_key=True)
    token = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)


class Session(Base):
    __tablename__ = "sessions"

    id = Column(String(255), primary_key=True)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(Text, nullable=True)
    payload = Column(Text, nullable=False)
    last_activity = Column(Integer, nullable=False)


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="SET NULL", onupdate="CASCADE"), nullable=True)
    action = Column(String(100), nullable=False)
    subject_type = Column(String(100), nullable=False)
    subject_id = Column(BigInteger, nullable=False)
    description = Column(Text, nullable=False)
    old_values = Column(JSON, nullable=True)
    new_values = Column(JSON, nullable=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)

    @property
    def subject(self) -> RelatedRef | None:
        return _to_related_ref(self.subject_type, self.subject_id)


class JobPosting(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "job_postings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(String(36), nullable=False, unique=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    department_id = Column(
        BigInteger, ForeignKey("departments.id", ondelete="SET NULL", onupdate="CASCADE"), nullable=True
    )
    job_category_id = Column(
        BigInteger, ForeignKey("job_categories.id", ondelete="SET NULL", onupdate="CASCADE"), nullable=True
    )
    job_type_id = Column(BigInteger, ForeignKey("job_types.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False)
    employment_level_id = Column(
        BigInteger, ForeignKey("employment_levels.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False
    )
    status_id = Column(
        BigInteger,
        ForeignKey("job_posting_statuses.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        default=1,
    )
    priority_level = Column(Enum("normal", "urgent", name="job_posting_priority"), default="normal")
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=False)
    responsibilities = Column(Text, nullable=False)
    benefits = Column(Text, nullable=True)
    team_info = Column(Text, nullable=True)
    salary_min = Column(Numeric(15, 2), nullable=True)
    salary_max = Column(Numeric(15, 2), nullable=True)
    is_salary_negotiable = Column(Boolean, default=False)
    location = Column(String(255), nullable=True)
    is_remote = Column(Boolean, default=False)
    application_deadline = Column(Date, nullable=True)
    max_applications = Column(Integer, nullable=True)
    views_count = Column(Integer, default=0)
    applications_count = Column(Integer, default=0)
    published_at = Column(DateTime(timezone=True), nullable=True)
    closed_at = Column(DateTime(timezone=True), nullable=True)
    created_by = Column(BigInteger, ForeignKey("users.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False)
    updated_by = Column(BigInteger, ForeignKey("users.id", ondelete="SET NULL", onupdate="CASCADE"), nullable=True)


class Application(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(String(36), nullable=False, unique=True)
    job_posting_id = Column(
        BigInteger, ForeignKey("job_postings.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False
    )
    candidate_id = Column(BigInteger, ForeignKey("candidates.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False)
    application_number = Column(String(50), nullable=False, unique=True)
    status_id = Column(
        BigInteger,
        ForeignKey("application_statuses.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        default=1,
    )
    rejection_reason = Column(Text, nullable=True)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    rejected_at = Column(DateTime(timezone=True), nullable=True)
    reviewed_by = Column(BigInteger, ForeignKey("users.id", ondelete="SET NULL", onupdate="CASCADE"), nullable=True)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)
    approval_email_sent = Column(Boolean, default=False)
    approval_email_sent_at = Column(DateTime(timezone=True), nullable=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(Text, nullable=True)
    source = Column(String(100), default="website")


class JobView(Base):
    __tablename__ = "job_views"

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_posting_id = Column(
        BigInteger, ForeignKey("job_postings.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False
    )
    ip_address = Column(String(45), nullable=False)
    user_agent = Column(Text, nullable=True)
    referrer = Column(String(1000), nullable=True)
    session_id = Column(String(255), nullable=True)
    viewed_at = Column(DateTime(timezone=True), nullable=False)


class ApplicationDocument(TimestampMixin, Base):
    __tablename__ = "application_documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    application_id = Column(
        BigInteger, ForeignKey("applications.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False
    )
    document_type = Column(String(100), nullable=False)
    url = Column(String(1000), nullable=False)
    filename = Column(String(255), nullable=False)


class ApplicationNote(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "application_notes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    application_id = Column(
        BigInteger, ForeignKey("applications.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False
    )
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="RESTRICT", onupdate="CASCADE"), nullable=False)
    note = Column(Text, nullable=False)
    is_internal = Column(Boolean, default=True)


class MonthlyAnalytics(TimestampMixin, Base):
    __tablename__ = "monthly_analytics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    total_job_postings = Column(Integer, default=0)
    total_applications = Column(Integer, default=0)
    total_approved_applications = Column(Integer, default=0)
    total_rejected_applications = Column(Integer, default=0)
    total_job_views = Column(Integer, default=0)
    avg_applications_per_job = Column(Numeric(8, 2), default=0)
    top_department_id = Column(
        BigInteger, ForeignKey("departments.id", ondelete="SET NULL", onupdate="CASCADE"), nullable=True
    )
    top_job_category_id = Column(
        BigInteger, ForeignKey("job_categories.id", ondelete="SET NULL", onupdate="CASCADE"), nullable=True
    )


class EmailVerificationToken(TimestampMixin, Base):
    __tablename__ = "email_verification_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String(255), nullable=False, unique=True)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False)
    type = Column(Enum("email_verification", "password_reset", name="email_verification_token_type"), default="email_verification")
    is_used = Column(Boolean, default=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    used_at = Column(DateTime(timezone=True), nullable=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(String(500), nullable=True)

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or _utcnow()
        expires_at = self.expires_at
        # SQLite hands timestamps back naive; they are stored as UTC.
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now >= expires_at

    def mark_used(self, at: datetime | None = None) -> None:
        if self.is_used:
            raise ValueError("Token has already been used")
        self.is_used = True
        self.used_at = at or _utcnow()
