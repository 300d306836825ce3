"""Timezone-aware datetime helpers."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)
