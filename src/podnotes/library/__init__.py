"""Podcast library: entry models, validation, storage, tags and filtering."""

from podnotes.library.filters import (
    DEFAULT_SORT_MODE,
    FilterState,
    FilterStateManager,
    SortMode,
    filter_entries,
    parse_sort_mode,
)
from podnotes.library.models import PodcastEntry, PodcastSummary, Resource
from podnotes.library.store import PodcastLibrary
from podnotes.library.tags import TagCount, TagOrder, get_all_tags, total_tag_count
from podnotes.library.validation import (
    FieldError,
    ValidationResult,
    load_entries_file,
    parse_and_validate_json,
    parse_entry,
    validate_podcast_data,
)

__all__ = [
    "DEFAULT_SORT_MODE",
    "FieldError",
    "FilterState",
    "FilterStateManager",
    "PodcastEntry",
    "PodcastLibrary",
    "PodcastSummary",
    "Resource",
    "SortMode",
    "TagCount",
    "TagOrder",
    "ValidationResult",
    "filter_entries",
    "get_all_tags",
    "load_entries_file",
    "parse_and_validate_json",
    "parse_entry",
    "parse_sort_mode",
    "total_tag_count",
    "validate_podcast_data",
]
