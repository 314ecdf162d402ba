"""Boundary Protocols — contracts between the services and their IO collaborators.

Invariants:
    - Services depend on these Protocols, never on a concrete transport
    - Implementations are constructed once at startup and injected

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class MailResult:
    """Outcome of one send attempt."""
    success: bool
    error: str | None = None


class MailSender(Protocol):
    """Contract for transactional email delivery — implemented by infrastructure."""
    async def send(
        self, to: str, subject: str, html: str, text: str | None = None,
    ) -> MailResult: ...
