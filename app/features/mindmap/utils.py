"""Helpers shared by the node and edge use cases."""

import secrets
from datetime import UTC, datetime

# 8 random bytes encode to 11 URL-safe characters, no padding.
ID_NUM_BYTES = 8


def generate_id() -> str:
    """Generate a short, URL-safe, random identifier."""
    return secrets.token_urlsafe(ID_NUM_BYTES)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def is_blank(value: str | None) -> bool:
    """True for None, the empty string, or whitespace only."""
    return value is None or value.strip() == ""
