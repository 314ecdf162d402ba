"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RequestId and InviteCodeId wrap UUIDs
    - Request lifecycle encoded as an Enum — no raw string matching
    - pending -> approved is the only transition, and it is one-way

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and store in String columns without converters
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

RequestId = NewType("RequestId", UUID)
InviteCodeId = NewType("InviteCodeId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class RequestStatus(str, Enum):
    """Founders request lifecycle states — maps to DB `status` column."""
    PENDING = "pending"
    APPROVED = "approved"


class ApprovalWarning(str, Enum):
    """Non-fatal problems reported alongside a successful approval."""
    STATUS_UPDATE_FAILED = "status_update_failed"
    STATUS_ALREADY_CHANGED = "status_already_changed"
    EMAIL_NOT_SENT = "email_not_sent"
