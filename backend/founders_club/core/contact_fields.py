"""Contact Fields — pure normalization and validation of request form input.

Invariants:
    - Emails are compared and stored trimmed + lower-cased
    - Required fields must be non-blank after trimming
    - An empty optional note is stored as None, never ""

Design Decisions:
    - Deliberately loose email check (local@domain.tld): deliverability is proven
      by the invite email itself, not by a stricter regex
    - full name falls back to "first last": the request form posts split names
"""

import re

from founders_club.core.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS_MESSAGE = "All required fields must be provided"
INVALID_EMAIL_MESSAGE = "Invalid email format"


def clean(value: str | None) -> str | None:
    """Trim a string; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def compose_full_name(
    full_name: str | None,
    first_name: str | None = None,
    last_name: str | None = None,
) -> str | None:
    """Explicit full name wins; otherwise join first and last with one space."""
    explicit = clean(full_name)
    if explicit:
        return explicit
    parts = [p for p in (clean(first_name), clean(last_name)) if p]
    return " ".join(parts) or None


def require_fields(**fields: str | None) -> dict[str, str]:
    """Trim every field and raise ValidationError naming the first blank one."""
    cleaned: dict[str, str] = {}
    for name, value in fields.items():
        value = clean(value)
        if value is None:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE, field=name)
        cleaned[name] = value
    return cleaned

