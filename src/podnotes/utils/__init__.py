"""Utility functions and helpers for Podnotes."""

from podnotes.utils.errors import (
    ConfigError,
    DuplicateEntryError,
    EntryNotFoundError,
    EntryValidationError,
    InvalidConfigError,
    InvalidSortModeError,
    LibraryError,
    NotFoundError,
    PodnotesError,
)
from podnotes.utils.paths import (
    get_config_dir,
    get_config_file,
    get_data_dir,
    get_library_file,
    get_log_file,
)

__all__ = [
    # Errors
    "PodnotesError",
    "ConfigError",
    "InvalidConfigError",
    "LibraryError",
    "NotFoundError",
    "EntryNotFoundError",
    "DuplicateEntryError",
    "EntryValidationError",
    "InvalidSortModeError",
    # Paths
    "get_config_dir",
    "get_data_dir",
    "get_config_file",
    "get_library_file",
    "get_log_file",
]
