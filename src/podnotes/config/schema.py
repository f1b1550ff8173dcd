"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from podnotes.library.filters import DEFAULT_SORT_MODE, SortMode
from podnotes.library.tags import TagOrder

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class GlobalConfig(BaseModel):
    """Global Podnotes configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"
    library_file: Path | None = None  # If None, uses the XDG data dir

    # Listing defaults
    default_sort: SortMode = DEFAULT_SORT_MODE
    tag_order: TagOrder = TagOrder.FREQUENCY
    list_limit: int = Field(default=50, ge=1, le=10_000)
