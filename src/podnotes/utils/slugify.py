"""URL slug helpers for podcast entries."""

import re

SHORT_ID_LENGTH = 8


def slugify(text: str) -> str:
    """Convert text to a URL-safe slug.

    Examples:
        >>> slugify("Building Habits That Stick!")
        'building-habits-that-stick'
    """
    slug = text.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def generate_url_slug(title: str, entry_id: str) -> str:
    """Build ``<title-slug>-<short-id>`` using the first 8 chars of the id."""
    short_id = entry_id[:SHORT_ID_LENGTH]
    slug = slugify(title)
    return f"{slug}-{short_id}" if slug else short_id


def extract_short_id(slug: str) -> str:
    """Return the short id (last hyphen-separated part) of a URL slug.

    The short id is a prefix of the full entry id; callers match entries
    whose id starts with it.
    """
    return slug.rsplit("-", 1)[-1]
