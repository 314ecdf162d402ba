"""FoundersRequest ORM — one visitor's request to join the Founders Club.

Invariants:
    - id is UUID primary key (client-side default)
    - email is stored trimmed and lower-cased
    - at most one pending row per email (partial unique index)
    - status transitions: pending -> approved, never back

Design Decisions:
    - Partial unique index declared for both postgresql and sqlite so tests
      exercise the same constraint production relies on
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, Index, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from founders_club.core.domain_types import RequestStatus
from founders_club.db.base import Base

_PENDING_ONLY = text("status = 'pending'")


class FoundersRequest(Base):
    """A pending or approved Founders Club membership request."""
    __tablename__ = "founders_requests"
    __table_args__ = (
        Index(
            "uq_founders_requests_pending_email", "email",
            unique=True,
            postgresql_where=_PENDING_ONLY,
            sqlite_where=_PENDING_ONLY,
        ),
        Index("ix_founders_requests_email_created", "email", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    profession: Mapped[str] = mapped_column(String(200), nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=RequestStatus.PENDING.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
