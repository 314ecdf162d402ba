"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or SMTP relay
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("SEND_EMAILS", "false")
os.environ.setdefault("LOG_FORMAT", "text")
