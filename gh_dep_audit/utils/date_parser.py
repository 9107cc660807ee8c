"""Timestamp parsing and staleness checks for commit activity."""

from datetime import datetime, timedelta, timezone

# Three years, counted as 365-day years
STALE_AFTER = timedelta(days=3 * 365)


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO 8601 timestamp as returned by the GitHub API.

    Supports a trailing ``Z`` (2024-01-01T10:00:00Z) and explicit offsets.
    Naive timestamps are taken to be UTC.

    Args:
        value: Timestamp string

    Returns:
        Timezone-aware datetime, or None if the value does not parse
    """
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_stale(value: str, now: datetime | None = None) -> bool:
    """Check whether a commit timestamp is older than STALE_AFTER.

    Unparseable values, including the 'Unknown' placeholder, are never stale.

    Args:
        value: Raw timestamp string
        now: Reference time, defaults to the current UTC time

    Returns:
        True if the timestamp is strictly before ``now - STALE_AFTER``
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return False

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    return parsed < now - STALE_AFTER
