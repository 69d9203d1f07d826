from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, the form SQLite DateTime columns round-trip."""
    return datetime.now(UTC).replace(tzinfo=None)


def format_utc(value: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision and a Z suffix, e.g. 2025-01-05T10:00:00.000Z"""
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"
