"""Search, tag filtering and sorting of podcast entries.

The engine is a pure function of (collection, FilterState): it recomputes the
whole view on every call. Filter state lives in an explicit, frozen
``FilterState`` that only changes through ``FilterStateManager``.

Pipeline (fixed order):
1. Search: case-insensitive substring match on title, creator, podcast name
   or guest name. Skipped when the query is blank.
2. Tags: keep entries carrying ANY selected tag. Skipped when none selected.
3. Sort: one of six stable orderings; ties keep their filtered order.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from podnotes.library.models import PodcastEntry
from podnotes.utils.datetime import parse_timestamp
from podnotes.utils.errors import InvalidSortModeError

logger = logging.getLogger(__name__)


class SortMode(str, Enum):
    """Orderings available for the filtered list."""

    DATE_NEWEST = "date-newest"
    DATE_OLDEST = "date-oldest"
    RATING_HIGH = "rating-high"
    RATING_LOW = "rating-low"
    DURATION_LONG = "duration-long"
    DURATION_SHORT = "duration-short"


DEFAULT_SORT_MODE = SortMode.DATE_NEWEST


def parse_sort_mode(value: SortMode | str) -> SortMode:
    """Convert a string to a SortMode.

    Raises:
        InvalidSortModeError: If the value is not one of the six modes
    """
    try:
        return SortMode(value)
    except ValueError:
        valid = ", ".join(m.value for m in SortMode)
        raise InvalidSortModeError(
            f"Invalid sort mode: {value!r}",
            suggestion=f"Valid modes: {valid}",
        ) from None


class FilterState(BaseModel):
    """The user's current search, tag and sort selections.

    Immutable: mutators on ``FilterStateManager`` replace the whole object.
    Selected tags that no longer exist in the collection are kept; they
    simply match nothing.
    """

    model_config = ConfigDict(frozen=True)

    search_query: str = ""
    selected_tags: frozenset[str] = Field(default_factory=frozenset)
    sort_by: SortMode = DEFAULT_SORT_MODE

    @property
    def has_active_filters(self) -> bool:
        """True if anything differs from the cleared state."""
        return bool(
            self.search_query
            or self.selected_tags
            or self.sort_by != DEFAULT_SORT_MODE
        )


def _matches_search(entry: PodcastEntry, query: str) -> bool:
    fields = (entry.title, entry.creator, entry.podcast_name, entry.guest_name)
    return any(field is not None and query in field.lower() for field in fields)


def _matches_tags(entry: PodcastEntry, selected_tags: frozenset[str]) -> bool:
    return not selected_tags.isdisjoint(entry.tags)


def _created_key(entry: PodcastEntry) -> tuple[int, float]:
    # Unparseable timestamps rank below every valid one
    created = parse_timestamp(entry.created_at)
    if created is None:
        return (0, 0.0)
    return (1, created.timestamp())


def _rating_key(entry: PodcastEntry) -> int:
    return entry.rating or 0


def _duration_key(entry: PodcastEntry) -> int:
    return entry.duration_minutes or 0


_SORT_KEYS: dict[SortMode, tuple[Callable[[PodcastEntry], object], bool]] = {
    SortMode.DATE_NEWEST: (_created_key, True),
    SortMode.DATE_OLDEST: (_created_key, False),
    SortMode.RATING_HIGH: (_rating_key, True),
    SortMode.RATING_LOW: (_rating_key, False),
    SortMode.DURATION_LONG: (_duration_key, True),
    SortMode.DURATION_SHORT: (_duration_key, False),
}


def filter_entries(
    entries: Iterable[PodcastEntry],
    state: FilterState | None = None,
) -> tuple[PodcastEntry, ...]:
    """Apply search, tag filter and sort to a podcast collection.

    Args:
        entries: Full podcast collection (not modified)
        state: Current filter state (defaults to the cleared state)

    Returns:
        Filtered, sorted, read-only sequence of entries
    """
    state = state or FilterState()
    result = list(entries)

    if state.search_query.strip():
        query = state.search_query.lower()
        result = [e for e in result if _matches_search(e, query)]

    if state.selected_tags:
        result = [e for e in result if _matches_tags(e, state.selected_tags)]

    key, reverse = _SORT_KEYS[state.sort_by]
    # sorted() is stable, including with reverse=True
    result = sorted(result, key=key, reverse=reverse)  # type: ignore[arg-type]

    return tuple(result)


class FilterStateManager:
    """Owner of the current FilterState.

    Every mutation builds a new frozen state and swaps it in under a lock,
    so concurrent readers of ``state`` always see a complete snapshot.

    Example:
        >>> manager = FilterStateManager()
        >>> manager.toggle_tag("AI")
        >>> manager.set_sort_by("rating-high")
        >>> visible = manager.apply(library.list_entries())
    """

    def __init__(self, initial: FilterState | None = None) -> None:
        self._state = initial or FilterState()
        self._lock = threading.Lock()

    @property
    def state(self) -> FilterState:
        """Current filter state snapshot."""
        return self._state

    def _replace(self, update: Callable[[FilterState], FilterState]) -> FilterState:
        with self._lock:
            self._state = update(self._state)
            return self._state

    def set_search_query(self, text: str) -> FilterState:
        """Replace the search query verbatim (no trimming)."""
        return self._replace(lambda s: s.model_copy(update={"search_query": text}))

    def toggle_tag(self, tag: str) -> FilterState:
        """Select the tag if unselected, otherwise deselect it."""

        def toggle(s: FilterState) -> FilterState:
            return s.model_copy(update={"selected_tags": s.selected_tags ^ {tag}})

        return self._replace(toggle)

    def set_sort_by(self, mode: SortMode | str) -> FilterState:
        """Replace the sort mode.

        Raises:
            InvalidSortModeError: If ``mode`` is unknown; state is unchanged
        """
        sort_mode = parse_sort_mode(mode)
        return self._replace(lambda s: s.model_copy(update={"sort_by": sort_mode}))

    def clear_filters(self) -> FilterState:
        """Reset to empty query, no tags and newest-first sorting."""
        logger.debug("Clearing filters")
        return self._replace(lambda s: FilterState())

    def apply(self, entries: Iterable[PodcastEntry]) -> tuple[PodcastEntry, ...]:
        """Filter and sort ``entries`` with the current state."""
        return filter_entries(entries, self._state)
