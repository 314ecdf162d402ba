"""Dependency Wiring — builds per-request services from process-wide clients.

Invariants:
    - The mail sender is created once in the lifespan and read from app.state
    - Services get a fresh request-scoped DB session via get_db

Design Decisions:
    - Annotated aliases keep route signatures short and let tests override
      get_db / get_mailer without touching the services
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from founders_club.config import Settings, get_settings
from founders_club.core.repository_protocols import MailSender
from founders_club.infrastructure.database import get_db
from founders_club.services.approval import ApprovalService
from founders_club.services.request_intake import RequestIntakeService


def get_mailer(request: Request) -> MailSender:
    """Mail sender constructed at startup."""
    mailer = getattr(request.app.state, "mailer", None)
    if mailer is None:
        raise RuntimeError("Mailer not initialized")
    return mailer


def get_intake_service(
    db: AsyncSession = Depends(get_db),
) -> RequestIntakeService:
    return RequestIntakeService(db)


def get_approval_service(
    db: AsyncSession = Depends(get_db),
    mailer: MailSender = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
) -> ApprovalService:
    return ApprovalService(
        db,
        mailer,
        ttl_hours=settings.invite_code_ttl_hours,
        max_attempts=settings.invite_code_max_attempts,
        brand=settings.brand_name,
        product_selection_url=settings.product_selection_url,
    )


IntakeServiceDep = Annotated[RequestIntakeService, Depends(get_intake_service)]
ApprovalServiceDep = Annotated[ApprovalService, Depends(get_approval_service)]
