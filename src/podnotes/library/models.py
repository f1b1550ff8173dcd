"""Data models for podcast entries.

Records arrive as loosely-typed JSON, either camelCase (``podcastName``) from
exported notes or snake_case (``podcast_name``) from the AI summary
generator. Both spellings are accepted; records are always written back in
camelCase.

Optional fields have exactly one "absent" representation: ``None``. Missing
keys, explicit ``null`` and blank strings all normalize to it here, so code
downstream of these models never has to tell them apart.
"""

from datetime import date, datetime
from typing import Annotated, Any
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from podnotes.utils.datetime import now_utc
from podnotes.utils.slugify import generate_url_slug

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _timestamp_to_text(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class CamelModel(BaseModel):
    """Base model reading and writing camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Resource(CamelModel):
    """A book, tool or link mentioned in an episode.

    A bare string is accepted and taken as the title.
    """

    title: NonEmptyStr
    link: str | None = None

    @model_validator(mode="before")
    @classmethod
    def coerce_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"title": data}
        return data

    @field_validator("link", mode="before")
    @classmethod
    def normalize_link(cls, v: Any) -> Any:
        return _blank_to_none(v)


class PodcastSummary(CamelModel):
    """Structured summary of one episode."""

    main_topic: NonEmptyStr
    key_takeaways: list[str]
    core_insights: list[str]
    actionable_advice: list[str]
    resources_mentioned: list[Resource]


class PodcastEntry(CamelModel):
    """A stored podcast-summary record.

    Entries are immutable; edits produce a new instance (see
    ``PodcastLibrary.update_entry``). ``created_at`` and ``published_at`` are
    kept as the original text rather than parsed, so a malformed timestamp
    does not block an import. Sorting treats such values as older than any
    valid timestamp.

    Example:
        >>> entry = PodcastEntry(
        ...     title="Building Habits That Stick",
        ...     podcast_name="The Growth Mindset",
        ...     creator="Alex Chen",
        ...     source_link="https://www.youtube.com/watch?v=example1",
        ...     tags=["habits", "productivity"],
        ...     summary=summary,
        ... )
    """

    model_config = ConfigDict(frozen=True)

    id: NonEmptyStr = Field(default_factory=lambda: str(uuid4()))
    title: NonEmptyStr
    podcast_name: NonEmptyStr
    creator: NonEmptyStr
    guest_name: str | None = None
    source_link: NonEmptyStr
    created_at: str = Field(default_factory=lambda: now_utc().isoformat())
    published_at: str | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    rating: int | None = Field(default=None, ge=1, le=5)
    tags: list[NonEmptyStr] = Field(..., min_length=1)
    your_notes: str | None = None
    summary: PodcastSummary

    @field_validator("guest_name", "published_at", "your_notes", mode="before")
    @classmethod
    def normalize_optional_text(cls, v: Any) -> Any:
        return _blank_to_none(_timestamp_to_text(v))

    @field_validator("created_at", mode="before")
    @classmethod
    def normalize_created_at(cls, v: Any) -> Any:
        if v is None:
            return now_utc().isoformat()
        return _timestamp_to_text(v)

    @field_validator("tags")
    @classmethod
    def deduplicate_tags(cls, v: list[str]) -> list[str]:
        """Drop repeated tags, keeping first-appearance order."""
        return list(dict.fromkeys(v))

    @property
    def slug(self) -> str:
        """URL slug: slugified title plus the first 8 chars of the id."""
        return generate_url_slug(self.title, self.id)

    def to_record(self) -> dict[str, Any]:
        """Serialize to a camelCase JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
