"""Datetime helpers.

All timestamps handled by Podnotes are timezone-aware UTC. Parsing is
lenient: anything that cannot be read as ISO-8601 yields ``None`` instead
of raising, so malformed records can still be listed and sorted.
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp string.

    Accepts full timestamps (``2026-01-24T10:00:00Z``,
    ``2026-01-24T10:00:00+02:00``) and date-only strings (``2026-01-24``).
    Naive values are assumed to be UTC.

    Args:
        value: Timestamp string (or datetime)

    Returns:
        Aware datetime, or None if the value is missing or unparseable
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # fromisoformat() only understands "Z" from Python 3.11 on
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(value: object, fallback: str = "-") -> str:
    """Format a timestamp as YYYY-MM-DD for display."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return fallback
    return parsed.strftime("%Y-%m-%d")
