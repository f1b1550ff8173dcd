"""Configuration management for Podnotes."""

from podnotes.config.manager import ConfigManager
from podnotes.config.schema import GlobalConfig

__all__ = ["ConfigManager", "GlobalConfig"]
