"""Custom exceptions for Podnotes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from podnotes.library.validation import FieldError


class PodnotesError(Exception):
    """Base exception for all Podnotes errors.

    Args:
        message: Human-readable error message
        suggestion: Optional hint shown below the error in the CLI
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.suggestion = suggestion


class ConfigError(PodnotesError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class LibraryError(PodnotesError):
    """Podcast library storage errors."""

    pass


class NotFoundError(LibraryError):
    """Requested resource does not exist."""

    pass


class EntryNotFoundError(NotFoundError):
    """Podcast entry not found in the library."""

    pass


class DuplicateEntryError(LibraryError):
    """Podcast entry with the same id already exists."""

    pass


class EntryValidationError(PodnotesError):
    """Podcast data failed validation at the import boundary.

    Attributes:
        errors: Field-level problems, one per invalid field
    """

    def __init__(
        self,
        message: str,
        errors: list[FieldError] | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message, suggestion=suggestion)
        self.errors = errors or []


class InvalidSortModeError(PodnotesError, ValueError):
    """Unknown sort mode requested."""

    pass
