"""Helpers for terminal display."""


def truncate_text(text: str, max_length: int = 60) -> str:
    """Truncate text to max_length, adding an ellipsis if cut."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3].rstrip() + "..."


def truncate_url(url: str, max_length: int = 50) -> str:
    """Truncate a URL for table display.

    Drops the scheme first, then cuts from the middle so both the host and
    the tail of the path stay visible.

    Examples:
        >>> truncate_url("https://www.youtube.com/watch?v=abc", 30)
        'www.youtube.com/watch?v=abc'
    """
    display = url.split("://", 1)[-1]
    if len(display) <= max_length:
        return display

    keep = max_length - 3
    head = keep // 2 + keep % 2
    tail = keep // 2
    return f"{display[:head]}...{display[-tail:]}" if tail else display[:head] + "..."


def format_duration(minutes: int | None) -> str:
    """Format a duration in minutes as e.g. ``1h 15m`` or ``45m``."""
    if minutes is None:
        return "-"
    hours, mins = divmod(minutes, 60)
    if hours:
        return f"{hours}h {mins:02d}m"
    return f"{mins}m"


def format_rating(rating: int | None) -> str:
    """Format a 1-5 rating as stars."""
    if rating is None:
        return "-"
    return "★" * rating + "☆" * (5 - rating)
