"""Approval — issues a Founders Club invite code for a pending request and emails it.

Invariants:
    - Only a pending request can be approved; approval is not repeatable
    - Issued codes are unique (pre-checked, then enforced by a unique column)
    - At most one code per request (unique request_id)
    - expires_at = clock() + ttl_hours, read once per approval
    - Once the code row is committed the operation succeeds; later failures
      (status flip, email) come back as warnings

Design Decisions:
    - Code insert committed before the status flip: a stale status is preferable
      to a request that could be approved twice with two different codes
    - Status flip is a conditional UPDATE ... WHERE status = 'pending' with a
      rowcount check, not a read-then-write
"""

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from founders_club.core.domain_types import ApprovalWarning, RequestStatus
from founders_club.core.errors import (
    ConflictError,
    DatabaseError,
    ErrorContext,
    GenerationError,
    NotFoundError,
    ValidationError,
)
from founders_club.core.invite_codes import (
    DEFAULT_TTL_HOURS,
    MAX_GENERATION_ATTEMPTS,
    Chooser,
    compute_expiry,
    generate_invite_code,
)
from founders_club.core.invite_email import render_invite_email
from founders_club.core.repository_protocols import MailSender
from founders_club.models.founders_request import FoundersRequest
from founders_club.models.invite_code import InviteCode

logger = logging.getLogger(__name__)

ALREADY_PROCESSED_MESSAGE = "Request has already been processed"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ApprovalOutcome:
    code: str
    expires_at: datetime
    warnings: list[ApprovalWarning] = field(default_factory=list)


@dataclass(frozen=True)
class _Recipient:
    request_id: UUID
    full_name: str
    email: str
    phone: str


class ApprovalService:
    """Approval side of the Founders Club workflow, bound to one DB session."""

    def __init__(
        self,
        db: AsyncSession,
        mailer: MailSender,
        *,
        ttl_hours: int = DEFAULT_TTL_HOURS,
        max_attempts: int = MAX_GENERATION_ATTEMPTS,
        brand: str = "Linkist",
        product_selection_url: str = "https://linkist.ai/product-selection",
        clock: Callable[[], datetime] = utcnow,
        choose: Chooser = secrets.choice,
    ):
        self.db = db
        self.mailer = mailer
        self.ttl_hours = ttl_hours
        self.max_attempts = max_attempts
        self.brand = brand
        self.product_selection_url = product_selection_url
        self._clock = clock
        self._choose = choose

    async def approve(self, request_id: str | UUID | None) -> ApprovalOutcome:
        """Approve a pending request and issue its invite code."""
        recipient = await self._load_pending(request_id)
        ctx = ErrorContext(request_id=str(recipient.request_id))

        code = await self._generate_unique_code(ctx)
        expires_at = compute_expiry(self._clock(), self.ttl_hours)
        await self._issue_code(recipient, code, expires_at, ctx)
        logger.info(
            "Invite code issued",
            extra={"request_id": ctx.request_id},
        )

        outcome = ApprovalOutcome(code=code, expires_at=expires_at)
        warning = await self._mark_approved(recipient.request_id)
        if warning:
            outcome.warnings.append(warning)
        if not await self._notify(recipient, code, expires_at):
            outcome.warnings.append(ApprovalWarning.EMAIL_NOT_SENT)
        return outcome

    async def _load_pending(self, request_id: str | UUID | None) -> _Recipient:
        if request_id is None or (isinstance(request_id, str) and not request_id.strip()):
            raise ValidationError("Request ID is required", field="requestId")
        rid = _parse_request_id(request_id)
        request = (
            await self.db.get(FoundersRequest, rid, populate_existing=True)
            if rid else None
        )
        if request is None:
            raise NotFoundError("Request", str(request_id))
        if request.status != RequestStatus.PENDING.value:
            raise ConflictError(
                ALREADY_PROCESSED_MESSAGE, ErrorContext(request_id=str(rid)),
            )
        # rollback expires ORM instances; keep plain values
        return _Recipient(
            request_id=request.id,
            full_name=request.full_name,
            email=request.email,
            phone=request.phone,
        )

    async def _generate_unique_code(self, ctx: ErrorContext) -> str:
        for attempt in range(1, self.max_attempts + 1):
            code = generate_invite_code(self._choose)
            taken = await self.db.scalar(
                select(InviteCode.id).where(InviteCode.code == code),
            )
            if taken is None:
                return code
            logger.warning(
                "Invite code collision, regenerating",
                extra={"request_id": ctx.request_id, "attempt": attempt},
            )
        raise GenerationError(self.max_attempts, ctx)

    async def _issue_code(
        self,
        recipient: _Recipient,
        code: str,
        expires_at: datetime,
        ctx: ErrorContext,
    ) -> None:
        self.db.add(InviteCode(
            code=code,
            email=recipient.email,
            phone=recipient.phone,
            request_id=recipient.request_id,
            expires_at=expires_at,
        ))
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            issued = await self.db.scalar(
                select(InviteCode.id).where(
                    InviteCode.request_id == recipient.request_id,
                ),
            )
            if issued is not None:
                raise ConflictError(ALREADY_PROCESSED_MESSAGE, ctx)
            logger.error(f"Invite code insert rejected: {e}", extra={"request_id": ctx.request_id})
            raise DatabaseError("Invite code could not be stored", "insert", ctx)

    async def _mark_approved(self, request_id: UUID) -> ApprovalWarning | None:
        try:
            result = await self.db.execute(
                update(FoundersRequest)
                .where(
                    FoundersRequest.id == request_id,
                    FoundersRequest.status == RequestStatus.PENDING.value,
                )
                .values(status=RequestStatus.APPROVED.value),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Error updating request status: {e}",
                extra={
                    "request_id": str(request_id),
                    "warning": ApprovalWarning.STATUS_UPDATE_FAILED.value,
                },
            )
            return ApprovalWarning.STATUS_UPDATE_FAILED

        if result.rowcount != 1:
            logger.warning(
                "Request was no longer pending when marking approved",
                extra={
                    "request_id": str(request_id),
                    "warning": ApprovalWarning.STATUS_ALREADY_CHANGED.value,
                },
            )
            return ApprovalWarning.STATUS_ALREADY_CHANGED
        return None

    async def _notify(
        self, recipient: _Recipient, code: str, expires_at: datetime,
    ) -> bool:
        message = render_invite_email(
            recipient.full_name, code, expires_at, self.ttl_hours,
            brand=self.brand, product_selection_url=self.product_selection_url,
        )
        extra = {
            "request_id": str(recipient.request_id),
            "warning": ApprovalWarning.EMAIL_NOT_SENT.value,
        }
        try:
            result = await self.mailer.send(
                recipient.email, message.subject, message.html, message.text,
            )
        except Exception as e:
            # code is already issued; delivery is best-effort
            logger.error(f"Error sending approval email: {e}", exc_info=True, extra=extra)
            return False
        if not result.success:
            logger.error(f"Failed to send approval email: {result.error}", extra=extra)
            return False
        logger.info(
            f"Approval email sent to {recipient.email}",
            extra={"request_id": str(recipient.request_id)},
        )
        return True


def _parse_request_id(value: str | UUID) -> UUID | None:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value.strip())
    except ValueError:
        return None
