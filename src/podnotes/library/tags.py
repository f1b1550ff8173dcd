"""Tag frequency aggregation over the podcast collection.

Two orderings are supported because two views consume the tag list
differently: the sidebar lists tags by popularity, the filter bar lists
them alphabetically.
"""

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from podnotes.library.models import PodcastEntry


class TagOrder(str, Enum):
    """Ordering of aggregated tags."""

    FREQUENCY = "frequency"  # Most used first, ties in first-seen order
    ALPHABETICAL = "alphabetical"  # Ascending by tag text


class TagCount(BaseModel):
    """Number of entries carrying a tag.

    Attributes:
        tag: Tag text, exactly as stored on the entries
        count: Number of entries whose tag set contains ``tag``
    """

    model_config = ConfigDict(frozen=True)

    tag: str
    count: int


def get_all_tags(
    entries: Iterable[PodcastEntry],
    order: TagOrder | str = TagOrder.FREQUENCY,
) -> list[TagCount]:
    """Count how many entries carry each distinct tag.

    Tags are a set per entry, so an entry contributes at most 1 to a tag's
    count. Tag text is compared exactly (``AI`` and ``ai`` are two tags).

    Args:
        entries: Podcast collection
        order: ``frequency`` (descending count, ties keep first-encountered
            order) or ``alphabetical`` (ascending tag text)

    Returns:
        One TagCount per distinct tag, empty for an empty collection

    Raises:
        ValueError: If ``order`` is not a known TagOrder

    Example:
        >>> [t.tag for t in get_all_tags(entries, "alphabetical")]
        ['AI', 'habits', 'productivity']
    """
    order = TagOrder(order)

    counts: dict[str, int] = {}
    for entry in entries:
        for tag in dict.fromkeys(entry.tags):
            counts[tag] = counts.get(tag, 0) + 1

    # dicts preserve insertion order, so counts is in first-encountered order
    # and sorted() keeps that order among equal counts
    if order == TagOrder.ALPHABETICAL:
        items = sorted(counts.items(), key=lambda item: item[0])
    else:
        items = sorted(counts.items(), key=lambda item: item[1], reverse=True)

    return [TagCount(tag=tag, count=count) for tag, count in items]


def total_tag_count(tag_counts: Iterable[TagCount]) -> int:
    """Sum of all counts (one per tag occurrence on an entry)."""
    return sum(tc.count for tc in tag_counts)
