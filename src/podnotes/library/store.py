"""Local JSON-file storage for the podcast library.

The library file holds every entry, newest first:

    {
      "version": "1",
      "entries": [{"id": "...", "title": "...", ...}, ...]
    }

Writes are atomic (write to a temp file, then rename).
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from podnotes.library.models import PodcastEntry
from podnotes.library.tags import TagCount, TagOrder, get_all_tags
from podnotes.library.validation import parse_entry
from podnotes.utils.errors import (
    DuplicateEntryError,
    EntryNotFoundError,
    LibraryError,
)
from podnotes.utils.slugify import extract_short_id

logger = logging.getLogger(__name__)

LIBRARY_FORMAT_VERSION = "1"


class PodcastLibrary:
    """Persistent collection of podcast entries.

    Example:
        >>> library = PodcastLibrary(Path("~/.local/share/podnotes/library.json"))
        >>> library.add_entry(entry)
        >>> library.list_entries()[0].id == entry.id
        True
    """

    def __init__(self, library_file: Path) -> None:
        """Initialize the library.

        Args:
            library_file: JSON file backing the library. Created on first write.
        """
        self.library_file = library_file

    def list_entries(self) -> list[PodcastEntry]:
        """Load all entries, newest first.

        Raises:
            LibraryError: If the library file is unreadable or corrupt
        """
        if not self.library_file.exists():
            return []

        try:
            with self.library_file.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise LibraryError(f"Cannot read library file {self.library_file}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
            raise LibraryError(
                f"Corrupt library file {self.library_file}: missing 'entries' list"
            )

        try:
            return [PodcastEntry.model_validate(record) for record in data["entries"]]
        except PydanticValidationError as e:
            raise LibraryError(f"Corrupt entry in {self.library_file}: {e}") from e

    def get_entry(self, entry_id: str) -> PodcastEntry:
        """Get an entry by its id.

        Raises:
            EntryNotFoundError: If no entry has this id
        """
        for entry in self.list_entries():
            if entry.id == entry_id:
                return entry
        raise EntryNotFoundError(f"Podcast entry '{entry_id}' not found")

    def find_entry(self, key: str) -> PodcastEntry:
        """Find an entry by id, URL slug or short id.

        Slugs end in the first 8 characters of the id, so a bare short id
        (an id prefix) works as well.

        Raises:
            EntryNotFoundError: If nothing matches, or a short id is ambiguous
        """
        entries = self.list_entries()

        for entry in entries:
            if entry.id == key or entry.slug == key:
                return entry

        short_id = extract_short_id(key)
        matches = [e for e in entries if short_id and e.id.startswith(short_id)]
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            raise EntryNotFoundError(
                f"'{key}' matches {len(matches)} entries",
                suggestion="Use the full entry id",
            )
        raise EntryNotFoundError(f"Podcast entry '{key}' not found")

    def add_entry(self, entry: PodcastEntry) -> None:
        """Insert an entry at the top of the library.

        Raises:
            DuplicateEntryError: If an entry with the same id exists
        """
        entries = self.list_entries()
        if any(e.id == entry.id for e in entries):
            raise DuplicateEntryError(f"Podcast entry '{entry.id}' already exists")

        self._save([entry, *entries])
        logger.info("Added podcast entry %s (%s)", entry.id, entry.title)

    def update_entry(
        self, entry_id: str, changes: PodcastEntry | dict[str, Any]
    ) -> PodcastEntry:
        """Replace an entry wholly or partially.

        Args:
            entry_id: Id of the entry to update
            changes: A full replacement entry, or a dict of fields to change
                (camelCase or snake_case keys). The id is never changed.

        Returns:
            The updated entry

        Raises:
            EntryNotFoundError: If no entry has this id
            EntryValidationError: If the updated entry is invalid
        """
        entries = self.list_entries()
        for index, current in enumerate(entries):
            if current.id == entry_id:
                break
        else:
            raise EntryNotFoundError(f"Podcast entry '{entry_id}' not found")

        if isinstance(changes, PodcastEntry):
            record = changes.to_record()
        else:
            record = current.to_record()
            for key, value in changes.items():
                field = PodcastEntry.model_fields.get(key)
                record[field.alias if field and field.alias else key] = value
        record["id"] = entry_id

        updated = parse_entry(record)
        entries[index] = updated
        self._save(entries)
        logger.info("Updated podcast entry %s", entry_id)
        return updated

    def remove_entry(self, entry_id: str) -> PodcastEntry:
        """Delete an entry by id.

        Returns:
            The removed entry

        Raises:
            EntryNotFoundError: If no entry has this id
        """
        entries = self.list_entries()
        remaining = [e for e in entries if e.id != entry_id]
        if len(remaining) == len(entries):
            raise EntryNotFoundError(f"Podcast entry '{entry_id}' not found")

        removed = next(e for e in entries if e.id == entry_id)
        self._save(remaining)
        logger.info("Removed podcast entry %s", entry_id)
        return removed

    def get_all_tags(self, order: TagOrder | str = TagOrder.FREQUENCY) -> list[TagCount]:
        """Tag counts over the whole library."""
        return get_all_tags(self.list_entries(), order)

    def _save(self, entries: list[PodcastEntry]) -> None:
        data = {
            "version": LIBRARY_FORMAT_VERSION,
            "entries": [entry.to_record() for entry in entries],
        }

        self.library_file.parent.mkdir(parents=True, exist_ok=True)
        temp_file = self.library_file.with_suffix(".tmp")

        try:
            with temp_file.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_file.replace(self.library_file)
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise LibraryError(f"Failed to save library: {e}") from e
