"""Founders Requests — intake, status lookup and admin listing endpoints.

Invariants:
    - POST /founders/request returns {success, requestId, message}
    - GET /founders/request omits status/createdAt when no request exists
    - Errors are raised as FoundersClubError and rendered by the global handlers
"""

import logging

from fastapi import APIRouter, Query

from founders_club.api.dependencies import IntakeServiceDep
from founders_club.core.domain_types import RequestStatus
from founders_club.schemas.founders import (
    FoundersRequestCreate,
    FoundersRequestCreated,
    FoundersRequestItem,
    FoundersRequestList,
    FoundersRequestStatus,
    Pagination,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/founders", tags=["founders"])


@router.post("/request", response_model=FoundersRequestCreated)
async def submit_request(body: FoundersRequestCreate, intake: IntakeServiceDep):
    """Submit a Founders Club access request."""
    request_id = await intake.submit(
        full_name=body.full_name,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        phone=body.phone,
        profession=body.profession,
        note=body.note,
    )
    return FoundersRequestCreated(request_id=request_id)


@router.get(
    "/request", response_model=FoundersRequestStatus,
    response_model_exclude_none=True,
)
async def get_request_status(
    intake: IntakeServiceDep,
    email: str | None = Query(None, max_length=320),
):
    """Status of the most recent request for an email."""
    lookup = await intake.lookup_status(email)
    return FoundersRequestStatus(
        has_request=lookup.has_request,
        status=lookup.status,
        created_at=lookup.created_at,
    )


@router.get("/requests", response_model=FoundersRequestList)
async def list_requests(
    intake: IntakeServiceDep,
    status_filter: RequestStatus | None = Query(None, alias="status"),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    """List requests with pagination, newest first."""
    requests = await intake.list_requests(status_filter, limit, offset)
    return FoundersRequestList(
        requests=[
            FoundersRequestItem(
                id=r.id,
                full_name=r.full_name,
                email=r.email,
                phone=r.phone,
                profession=r.profession,
                note=r.note,
                status=RequestStatus(r.status),
                created_at=r.created_at,
            )
            for r in requests
        ],
        pagination=Pagination(limit=limit, offset=offset),
    )
