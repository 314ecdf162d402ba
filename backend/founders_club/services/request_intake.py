"""Request Intake — validates and persists Founders Club requests, answers status lookups.

Invariants:
    - Stored email is trimmed + lower-cased; all other strings trimmed
    - A pending request blocks a new one for the same email (ConflictError)
    - An approved request blocks a new one for the same email (ConflictError)
    - No email is sent at intake

Design Decisions:
    - Duplicate check is one query over both statuses; pending wins when both exist
    - The partial unique index backs the pending check: a concurrent duplicate
      insert surfaces as the same ConflictError
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from founders_club.core.contact_fields import (
    INVALID_EMAIL_MESSAGE,
    clean,
    compose_full_name,
    is_valid_email,
    normalize_email,
    require_fields,
)
from founders_club.core.domain_types import RequestId, RequestStatus
from founders_club.core.errors import ConflictError, ErrorContext, ValidationError
from founders_club.models.founders_request import FoundersRequest

logger = logging.getLogger(__name__)

PENDING_CONFLICT_MESSAGE = (
    "You already have a pending request. Please wait for approval."
)
APPROVED_CONFLICT_MESSAGE = (
    "This email is already approved. Please check your email for the invite code."
)


@dataclass(frozen=True)
class StatusLookup:
    """Most recent request for an email, if any."""
    has_request: bool
    status: RequestStatus | None = None
    created_at: datetime | None = None


class RequestIntakeService:
    """Intake side of the Founders Club workflow, bound to one DB session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def submit(
        self,
        *,
        full_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        profession: str | None = None,
        note: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> RequestId:
        """Validate, de-duplicate and insert a pending request. Returns its id."""
        fields = require_fields(
            full_name=compose_full_name(full_name, first_name, last_name),
            email=email,
            phone=phone,
            profession=profession,
        )
        if not is_valid_email(fields["email"]):
            raise ValidationError(INVALID_EMAIL_MESSAGE, field="email")
        normalized = normalize_email(fields["email"])

        await self._ensure_no_open_request(normalized)

        request = FoundersRequest(
            full_name=fields["full_name"],
            email=normalized,
            phone=fields["phone"],
            profession=fields["profession"],
            note=clean(note),
            status=RequestStatus.PENDING.value,
        )
        self.db.add(request)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning("Concurrent duplicate founders request rejected")
            raise ConflictError(
                PENDING_CONFLICT_MESSAGE, ErrorContext(email=normalized),
            )

        logger.info(
            "Founders request submitted",
            extra={"request_id": str(request.id)},
        )
        return RequestId(request.id)

    async def lookup_status(self, email: str | None) -> StatusLookup:
        """Status and creation time of the newest request for email."""
        email = clean(email)
        if email is None:
            raise ValidationError("Email is required", field="email")
        result = await self.db.execute(
            select(FoundersRequest.status, FoundersRequest.created_at)
            .where(FoundersRequest.email == normalize_email(email))
            .order_by(FoundersRequest.created_at.desc())
            .limit(1),
        )
        row = result.first()
        if row is None:
            return StatusLookup(has_request=False)
        return StatusLookup(
            has_request=True,
            status=RequestStatus(row.status),
            created_at=row.created_at,
        )

    async def list_requests(
        self,
        status: RequestStatus | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[FoundersRequest]:
        """Requests newest first, optionally filtered by status."""
        query = select(FoundersRequest).order_by(
            FoundersRequest.created_at.desc(),
        )
        if status is not None:
            query = query.where(FoundersRequest.status == status.value)
        result = await self.db.execute(query.limit(limit).offset(offset))
        return list(result.scalars().all())

    async def _ensure_no_open_request(self, email: str) -> None:
        result = await self.db.execute(
            select(FoundersRequest.status).where(
                FoundersRequest.email == email,
                FoundersRequest.status.in_([
                    RequestStatus.PENDING.value, RequestStatus.APPROVED.value,
                ]),
            ),
        )
        statuses = set(result.scalars().all())
        if RequestStatus.PENDING.value in statuses:
            raise ConflictError(PENDING_CONFLICT_MESSAGE, ErrorContext(email=email))
        if RequestStatus.APPROVED.value in statuses:
            raise ConflictError(APPROVED_CONFLICT_MESSAGE, ErrorContext(email=email))

