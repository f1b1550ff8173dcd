"""Parse-then-validate boundary for imported podcast records.

Everything that enters the library passes through here. Records that do not
satisfy the ``PodcastEntry`` invariants (non-empty tags, rating in 1-5,
required text fields present) are rejected with field-level errors; nothing
downstream re-validates.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from podnotes.library.models import PodcastEntry
from podnotes.utils.errors import EntryValidationError

logger = logging.getLogger(__name__)


class FieldError(BaseModel):
    """A single validation problem.

    Attributes:
        field: Dotted path to the offending field (e.g. ``summary.keyTakeaways``)
        message: Human-readable description
    """

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationResult(BaseModel):
    """Outcome of validating one record."""

    is_valid: bool
    errors: list[FieldError] = Field(default_factory=list)
    data: PodcastEntry | None = None


def _format_loc(loc: tuple[Any, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path or "root"


def _field_errors(exc: PydanticValidationError) -> list[FieldError]:
    return [
        FieldError(field=_format_loc(err["loc"]), message=err["msg"])
        for err in exc.errors()
    ]


def validate_podcast_data(data: object) -> ValidationResult:
    """Validate a decoded JSON value as a podcast entry.

    Args:
        data: Decoded JSON (expected to be an object)

    Returns:
        ValidationResult with the parsed entry, or the field errors
    """
    if not isinstance(data, dict):
        return ValidationResult(
            is_valid=False,
            errors=[FieldError(field="root", message="Data must be a valid JSON object")],
        )

    try:
        entry = PodcastEntry.model_validate(data)
    except PydanticValidationError as e:
        return ValidationResult(is_valid=False, errors=_field_errors(e))

    return ValidationResult(is_valid=True, data=entry)


def parse_and_validate_json(text: str) -> ValidationResult:
    """Decode a JSON string and validate it as a podcast entry."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        return ValidationResult(
            is_valid=False,
            errors=[FieldError(field="json", message=f"Invalid JSON format: {e}")],
        )
    return validate_podcast_data(parsed)


def parse_entry(data: object) -> PodcastEntry:
    """Validate a decoded JSON value, raising on failure.

    Raises:
        EntryValidationError: If the record is invalid
    """
    result = validate_podcast_data(data)
    if not result.is_valid or result.data is None:
        raise EntryValidationError(
            f"Invalid podcast entry ({len(result.errors)} error(s))",
            errors=result.errors,
        )
    return result.data


def load_entries_file(path: Path) -> list[PodcastEntry]:
    """Load and validate podcast entries from a JSON file.

    The file may hold a single object or an array of objects. Validation is
    all-or-nothing: any invalid element rejects the whole file.

    Args:
        path: JSON file to read

    Returns:
        Parsed entries in file order

    Raises:
        EntryValidationError: If the file is unreadable, not JSON, or any
            element is invalid (field paths are prefixed with the array index)
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise EntryValidationError(f"Cannot read {path}: {e}") from e

    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as e:
        raise EntryValidationError(
            f"Invalid JSON in {path}",
            errors=[FieldError(field="json", message=f"Invalid JSON format: {e}")],
        ) from e

    if isinstance(decoded, list):
        records = decoded
        prefixes = [f"[{i}]" for i in range(len(decoded))]
    else:
        records = [decoded]
        prefixes = [""]

    if not records:
        raise EntryValidationError(f"No podcast entries found in {path}")

    entries: list[PodcastEntry] = []
    errors: list[FieldError] = []
    for prefix, record in zip(prefixes, records):
        result = validate_podcast_data(record)
        if result.data is not None:
            entries.append(result.data)
            continue
        for err in result.errors:
            if not prefix:
                field = err.field
            elif err.field == "root":
                field = prefix
            else:
                field = f"{prefix}.{err.field}"
            errors.append(FieldError(field=field, message=err.message))

    if errors:
        raise EntryValidationError(
            f"Invalid podcast data in {path} ({len(errors)} error(s))",
            errors=errors,
        )

    logger.debug("Loaded %d entries from %s", len(entries), path)
    return entries
