"""UTC timestamps for task rows.

Timestamps are timezone-aware UTC throughout. SQLite hands DateTime
columns back naive, so values read from the store pass through ensure_utc.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime (microsecond precision)."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime; convert an aware one to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
