"""Tests for PodcastLibrary storage."""

import json
from pathlib import Path

import pytest

from podnotes.library.store import PodcastLibrary
from podnotes.library.tags import TagOrder
from podnotes.utils.errors import (
    DuplicateEntryError,
    EntryNotFoundError,
    EntryValidationError,
    LibraryError,
)


@pytest.fixture
def library(tmp_path: Path) -> PodcastLibrary:
    return PodcastLibrary(tmp_path / "data" / "library.json")


class TestPodcastLibrary:
    """Tests for PodcastLibrary class."""

    def test_empty_when_file_missing(self, library):
        """Test a missing library file reads as empty."""
        assert library.list_entries() == []
        assert not library.library_file.exists()

    def test_add_creates_file(self, library, make_entry):
        """Test first write creates the file and parent directories."""
        library.add_entry(make_entry(id="pod-001"))

        assert library.library_file.exists()
        data = json.loads(library.library_file.read_text())
        assert data["version"] == "1"
        assert data["entries"][0]["id"] == "pod-001"
        assert "podcastName" in data["entries"][0]

    def test_new_entries_on_top(self, library, make_entry):
        """Test list_entries is newest-first by insertion."""
        library.add_entry(make_entry(id="first"))
        library.add_entry(make_entry(id="second"))

        assert [e.id for e in library.list_entries()] == ["second", "first"]

    def test_add_duplicate_raises(self, library, make_entry):
        """Test ids are unique across the library."""
        library.add_entry(make_entry(id="pod-001"))

        with pytest.raises(DuplicateEntryError):
            library.add_entry(make_entry(id="pod-001", title="Other"))

    def test_get_entry(self, library, make_entry):
        """Test lookup by id."""
        library.add_entry(make_entry(id="pod-001", title="Wanted"))

        assert library.get_entry("pod-001").title == "Wanted"

        with pytest.raises(EntryNotFoundError):
            library.get_entry("missing")

    def test_find_entry_by_slug_and_short_id(self, library, make_entry):
        """Test lookup by URL slug or id prefix."""
        entry = make_entry(id="3f2a9c1e-1111-2222", title="Deep Work")
        library.add_entry(entry)

        assert library.find_entry("deep-work-3f2a9c1e").id == entry.id
        assert library.find_entry("3f2a9c1e").id == entry.id
        assert library.find_entry(entry.id).id == entry.id

    def test_find_entry_ambiguous_short_id(self, library, make_entry):
        """Test an ambiguous short id is refused."""
        library.add_entry(make_entry(id="abcd1234-one"))
        library.add_entry(make_entry(id="abcd1234-two"))

        with pytest.raises(EntryNotFoundError) as exc_info:
            library.find_entry("abcd1234")

        assert exc_info.value.suggestion

    def test_update_partial(self, library, make_entry):
        """Test partial update with snake_case and camelCase keys."""
        library.add_entry(make_entry(id="pod-001", rating=2))

        updated = library.update_entry("pod-001", {"rating": 5, "guest_name": "James Clear"})
        updated = library.update_entry("pod-001", {"durationMinutes": 30})

        stored = library.get_entry("pod-001")
        assert stored == updated
        assert stored.rating == 5
        assert stored.guest_name == "James Clear"
        assert stored.duration_minutes == 30

    def test_update_clears_optional_field(self, library, make_entry):
        """Test setting an optional field to None removes it."""
        library.add_entry(make_entry(id="pod-001", rating=4))

        updated = library.update_entry("pod-001", {"rating": None})

        assert updated.rating is None

    def test_update_whole_entry_keeps_id(self, library, make_entry):
        """Test whole replacement never changes the id."""
        library.add_entry(make_entry(id="pod-001"))

        updated = library.update_entry("pod-001", make_entry(id="other", title="Replaced"))

        assert updated.id == "pod-001"
        assert updated.title == "Replaced"
        assert [e.id for e in library.list_entries()] == ["pod-001"]

    def test_update_id_change_ignored(self, library, make_entry):
        """Test an id in partial changes is ignored."""
        library.add_entry(make_entry(id="pod-001"))

        updated = library.update_entry("pod-001", {"id": "hijacked"})

        assert updated.id == "pod-001"

    def test_update_invalid_rejected(self, library, make_entry):
        """Test updates are revalidated and nothing is saved on failure."""
        library.add_entry(make_entry(id="pod-001", rating=3))

        with pytest.raises(EntryValidationError):
            library.update_entry("pod-001", {"rating": 9})

        assert library.get_entry("pod-001").rating == 3

    def test_update_missing_raises(self, library, make_entry):
        """Test updating an unknown id raises."""
        with pytest.raises(EntryNotFoundError):
            library.update_entry("missing", {"rating": 3})

    def test_update_preserves_position(self, library, make_entry):
        """Test updated entries keep their place in the list."""
        library.add_entry(make_entry(id="a"))
        library.add_entry(make_entry(id="b"))

        library.update_entry("a", {"title": "Renamed"})

        assert [e.id for e in library.list_entries()] == ["b", "a"]

    def test_remove_entry(self, library, make_entry):
        """Test deletion by id."""
        library.add_entry(make_entry(id="a"))
        library.add_entry(make_entry(id="b"))

        removed = library.remove_entry("a")

        assert removed.id == "a"
        assert [e.id for e in library.list_entries()] == ["b"]

        with pytest.raises(EntryNotFoundError):
            library.remove_entry("a")

    def test_get_all_tags(self, library, sample_entries):
        """Test tag aggregation over stored entries."""
        for entry in reversed(sample_entries):
            library.add_entry(entry)

        tags = library.get_all_tags(TagOrder.ALPHABETICAL)

        assert [(t.tag, t.count) for t in tags] == [
            ("AI", 1),
            ("Tech", 2),
            ("habits", 1),
            ("productivity", 2),
        ]

    def test_corrupt_json_raises(self, library):
        """Test unreadable JSON raises LibraryError."""
        library.library_file.parent.mkdir(parents=True)
        library.library_file.write_text("{broken")

        with pytest.raises(LibraryError):
            library.list_entries()

    def test_missing_entries_key_raises(self, library):
        """Test a file without an entries list raises LibraryError."""
        library.library_file.parent.mkdir(parents=True)
        library.library_file.write_text('{"version": "1"}')

        with pytest.raises(LibraryError):
            library.list_entries()

    def test_invalid_stored_entry_raises(self, library):
        """Test a stored entry violating invariants raises LibraryError."""
        library.library_file.parent.mkdir(parents=True)
        library.library_file.write_text('{"version": "1", "entries": [{"title": "x"}]}')

        with pytest.raises(LibraryError):
            library.list_entries()

    def test_no_temp_file_left_behind(self, library, make_entry):
        """Test atomic write cleans up its temp file."""
        library.add_entry(make_entry())

        assert not library.library_file.with_suffix(".tmp").exists()
