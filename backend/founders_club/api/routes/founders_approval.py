"""Founders Approval — admin endpoint that issues an invite code for a pending request.

Invariants:
    - Success returns {success, code, expiresAt, message, warnings}
    - warnings lists non-fatal problems (status flip, email) after the code was issued
"""

import logging

from fastapi import APIRouter

from founders_club.api.dependencies import ApprovalServiceDep
from founders_club.schemas.founders import ApprovalCreate, ApprovalResult

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/founders", tags=["founders-admin"])


@router.post("/approve", response_model=ApprovalResult)
async def approve_request(body: ApprovalCreate, approval: ApprovalServiceDep):
    """Approve a pending request and email its invite code."""
    outcome = await approval.approve(body.request_id)
    if outcome.warnings:
        logger.warning(
            f"Approval completed with warnings: {[w.value for w in outcome.warnings]}",
            extra={"request_id": str(body.request_id)},
        )
    return ApprovalResult(
        code=outcome.code,
        expires_at=outcome.expires_at,
        warnings=[w.value for w in outcome.warnings],
    )
