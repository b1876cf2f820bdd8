"""Time and datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC datetime.

    Returns:
        Current datetime in UTC timezone
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_datetime(dt_str: str) -> datetime:
    """Parse ISO datetime string.

    Args:
        dt_str: ISO format datetime string

    Returns:
        Parsed datetime object in UTC

    Raises:
        ValueError: If the string is not a recognised ISO 8601 timestamp
    """
    # Handle various ISO formats
    formats = [
        "%Y-%m-%dT%H:%M:%SZ",
        "%Y-%m-%dT%H:%M:%S.%fZ",
        "%Y-%m-%dT%H:%M:%S%z",
        "%Y-%m-%dT%H:%M:%S.%f%z",
    ]

    for fmt in formats:
        try:
            return ensure_utc(datetime.strptime(dt_str, fmt))
        except ValueError:
            continue

    # Fall back to the stdlib parser for offsets like +05:30 and date-only values
    try:
        return ensure_utc(datetime.fromisoformat(dt_str))
    except ValueError:
        raise ValueError(f"Could not parse datetime: {dt_str}") from None


def days_between(earlier: datetime, later: datetime) -> float:
    """Return the (possibly negative) number of days from earlier to later."""
    delta = ensure_utc(later) - ensure_utc(earlier)
    return delta.total_seconds() / 86400
