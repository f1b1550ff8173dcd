"""XDG-compliant path helpers for Podnotes."""

from pathlib import Path

import platformdirs

APP_NAME = "podnotes"


def get_config_dir() -> Path:
    """Get the configuration directory (e.g. ~/.config/podnotes)."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_data_dir() -> Path:
    """Get the data directory where the library file lives."""
    return Path(platformdirs.user_data_dir(APP_NAME))


def get_log_dir() -> Path:
    """Get the log directory."""
    return Path(platformdirs.user_log_dir(APP_NAME))


def get_config_file() -> Path:
    """Get path to config.yaml."""
    return get_config_dir() / "config.yaml"


def get_library_file() -> Path:
    """Get default path to the podcast library JSON file."""
    return get_data_dir() / "library.json"


def get_log_file() -> Path:
    """Get default path to the log file."""
    return get_log_dir() / "podnotes.log"
