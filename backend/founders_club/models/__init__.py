"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - InviteCode.request_id references FoundersRequest.id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from founders_club.models.founders_request import FoundersRequest  # noqa: F401
from founders_club.models.invite_code import InviteCode  # noqa: F401
