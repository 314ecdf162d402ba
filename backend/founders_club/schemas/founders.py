"""Founders Schemas — request and response bodies for the intake and approval endpoints.

Invariants:
    - Every body serializes with camelCase aliases (fullName, requestId, expiresAt)
    - Input fields are optional at the schema level; presence rules live in the
      services so they hold for non-HTTP callers too
    - Length caps reject oversized input before it reaches the database

Design Decisions:
    - alias_generator=to_camel + populate_by_name: tests and services can use
      snake_case, the form keeps posting camelCase
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from founders_club.core.domain_types import RequestStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Intake -------------------------------------------------------------------

class FoundersRequestCreate(CamelModel):
    """Request form submission."""
    full_name: str | None = Field(None, max_length=200)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=320)
    phone: str | None = Field(None, max_length=50)
    profession: str | None = Field(None, max_length=200)
    note: str | None = Field(None, max_length=2000)


class FoundersRequestCreated(CamelModel):
    success: bool = True
    request_id: UUID
    message: str = "Request submitted successfully"


class FoundersRequestStatus(CamelModel):
    """Status lookup — status/created_at omitted when has_request is False."""
    success: bool = True
    has_request: bool
    status: RequestStatus | None = None
    created_at: datetime | None = None


class FoundersRequestItem(CamelModel):
    id: UUID
    full_name: str
    email: str
    phone: str
    profession: str
    note: str | None = None
    status: RequestStatus
    created_at: datetime


class Pagination(BaseModel):
    limit: int
    offset: int


class FoundersRequestList(CamelModel):
    success: bool = True
    requests: list[FoundersRequestItem]
    pagination: Pagination


# --- Approval -----------------------------------------------------------------

class ApprovalCreate(CamelModel):
    request_id: str | None = Field(None, max_length=64)


class ApprovalResult(CamelModel):
    success: bool = True
    code: str
    expires_at: datetime
    message: str = "Request approved and invite code generated"
    warnings: list[str] = Field(default_factory=list)
