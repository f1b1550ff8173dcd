"""Shared pytest fixtures for Podnotes tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from podnotes.library.models import PodcastEntry


def _summary(**overrides: Any) -> dict[str, Any]:
    summary = {
        "main_topic": "How small changes compound over time.",
        "key_takeaways": ["Start small", "Stack habits"],
        "core_insights": ["Friction matters more than motivation."],
        "actionable_advice": ["Pick one habit this week"],
        "resources_mentioned": [{"title": "Atomic Habits", "link": "https://jamesclear.com"}],
    }
    summary.update(overrides)
    return summary


def _make_entry(**overrides: Any) -> PodcastEntry:
    data: dict[str, Any] = {
        "title": "Building Habits That Stick",
        "podcast_name": "The Growth Mindset",
        "creator": "Alex Chen",
        "source_link": "https://www.youtube.com/watch?v=example1",
        "created_at": "2026-01-01T12:00:00+00:00",
        "tags": ["habits"],
        "summary": _summary(),
    }
    data.update(overrides)
    return PodcastEntry.model_validate(data)


@pytest.fixture
def make_entry() -> Callable[..., PodcastEntry]:
    """Factory for valid PodcastEntry objects (snake_case overrides)."""
    return _make_entry


@pytest.fixture
def entry_record() -> dict[str, Any]:
    """A valid camelCase record as exported by the web app."""
    return {
        "id": "pod-001",
        "title": "Building Habits That Stick",
        "podcastName": "The Growth Mindset",
        "creator": "Alex Chen",
        "guestName": "James Clear",
        "sourceLink": "https://www.youtube.com/watch?v=example1",
        "createdAt": "2026-01-24T09:30:00.000Z",
        "publishedAt": "2026-01-24",
        "durationMinutes": 45,
        "rating": 5,
        "tags": ["habits", "productivity", "psychology"],
        "yourNotes": "Will apply the 2-minute rule.",
        "summary": {
            "keyTakeaways": ["Start with tiny habits"],
            "mainTopic": "How to build sustainable habits.",
            "coreInsights": ["The 2-minute rule removes the friction of starting."],
            "actionableAdvice": ["Stack one new habit onto an existing one"],
            "resourcesMentioned": [
                {"title": "Atomic Habits by James Clear", "link": "https://jamesclear.com/atomic-habits"},
                {"title": "Habit tracker template", "link": None},
            ],
        },
    }


@pytest.fixture
def sample_entries() -> list[PodcastEntry]:
    """Three entries with distinct dates, ratings, durations and tags."""
    return [
        _make_entry(
            id="pod-001",
            title="Building Habits That Stick",
            creator="Alex Chen",
            guest_name="James Clear",
            created_at="2026-01-03T10:00:00Z",
            duration_minutes=45,
            rating=5,
            tags=["habits", "productivity"],
        ),
        _make_entry(
            id="pod-002",
            title="The Future of AI and AGI",
            podcast_name="The AI Podcast",
            creator="Lex Fridman",
            guest_name="Demis Hassabis",
            created_at="2026-01-02T10:00:00Z",
            duration_minutes=75,
            rating=4,
            tags=["AI", "Tech"],
        ),
        _make_entry(
            id="pod-003",
            title="Deep Work in a Distracted World",
            podcast_name="Focus Radio",
            creator="Sam Rivers",
            created_at="2026-01-01T10:00:00Z",
            tags=["productivity", "Tech"],
        ),
    ]


@pytest.fixture
def sample_config_dict() -> dict[str, Any]:
    """Valid config.yaml content."""
    return {
        "version": "1",
        "log_level": "INFO",
        "default_sort": "date-newest",
        "tag_order": "frequency",
        "list_limit": 50,
    }


@pytest.fixture
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data directories at tmp_path."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    monkeypatch.setattr("podnotes.utils.paths.get_config_dir", lambda: config_dir)
    monkeypatch.setattr("podnotes.utils.paths.get_data_dir", lambda: data_dir)
    return tmp_path
