"""Invite Codes — pure generation of human-typeable codes and their expiry.

Invariants:
    - Codes are "FC-" + 8 symbols from a 32-symbol alphabet
    - Alphabet excludes visually ambiguous I, O, 0 and 1
    - Expiry is issue time + ttl hours, computed from the caller's clock reading

Design Decisions:
    - Randomness injected as a callable: tests pass a seeded random.Random
    - secrets.choice by default: codes gate a paid tier, so they come from the OS CSPRNG
"""

import re
import secrets
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta

CODE_PREFIX = "FC-"
CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CODE_LENGTH = 8
DEFAULT_TTL_HOURS = 72
MAX_GENERATION_ATTEMPTS = 10

INVITE_CODE_PATTERN = re.compile(
    rf"^{CODE_PREFIX}[{CODE_ALPHABET}]{{{CODE_LENGTH}}}$",
)

Chooser = Callable[[Sequence[str]], str]


def generate_invite_code(choose: Chooser = secrets.choice) -> str:
    """Return a fresh candidate code such as 'FC-4K7M9PQT'."""
    body = "".join(choose(CODE_ALPHABET) for _ in range(CODE_LENGTH))
    return f"{CODE_PREFIX}{body}"


def is_valid_invite_code(code: str) -> bool:
    return bool(INVITE_CODE_PATTERN.match(code))


def compute_expiry(issued_at: datetime, ttl_hours: int = DEFAULT_TTL_HOURS) -> datetime:
    """Expiry timestamp for a code issued at issued_at."""
    return issued_at + timedelta(hours=ttl_hours)
