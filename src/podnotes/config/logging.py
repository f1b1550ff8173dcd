"""Logging setup for the Podnotes CLI."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

LOGGER_NAME = "podnotes"


def _level_from_name(name: str | None, default: int = logging.WARNING) -> int:
    level = logging.getLevelName((name or "").upper())
    return level if isinstance(level, int) else default


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str | None = None,
) -> None:
    """Configure the ``podnotes`` logger.

    Console output goes to stderr through rich so it never mixes with
    ``--json`` output on stdout. Handlers carry no level of their own; the
    logger level decides what is emitted.

    Args:
        verbose: Force DEBUG level
        log_file: Optional file that receives plain-text logs
        level: Level name (e.g. "INFO"); ignored when verbose is set
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else _level_from_name(level))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            show_path=verbose,
            rich_tracebacks=verbose,
        )
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)


def apply_log_level(level: str) -> None:
    """Apply the configured level unless ``--verbose`` already forced DEBUG."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.level != logging.DEBUG:
        logger.setLevel(_level_from_name(level, default=logging.INFO))
