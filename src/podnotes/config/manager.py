"""Configuration manager for loading and saving Podnotes config."""

import logging
from pathlib import Path

import yaml

from podnotes.config.defaults import DEFAULT_GLOBAL_CONFIG, get_default_config_content
from podnotes.config.schema import GlobalConfig
from podnotes.utils.errors import InvalidConfigError
from podnotes.utils import paths

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the Podnotes configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        if config_dir is None:
            self.config_dir = paths.get_config_dir()
            self.config_file = paths.get_config_file()
        else:
            self.config_dir = config_dir
            self.config_file = config_dir / "config.yaml"

    def load_config(self) -> GlobalConfig:
        """Load and validate global configuration.

        Returns:
            Validated GlobalConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            self._create_default_config()
            return DEFAULT_GLOBAL_CONFIG.model_copy()

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return GlobalConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}",
                suggestion="Fix the file or delete it to restore defaults",
            ) from e

    def save_config(self, config: GlobalConfig) -> None:
        """Save global configuration.

        Args:
            config: GlobalConfig instance to save
        """
        data = config.model_dump(mode="json")
        if data.get("library_file") is None:
            data.pop("library_file", None)

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def resolve_library_file(self, config: GlobalConfig | None = None) -> Path:
        """Get the library file path, honouring the config override."""
        config = config or self.load_config()
        if config.library_file is not None:
            return config.library_file.expanduser()
        return paths.get_library_file()

    def _create_default_config(self) -> None:
        """Create default config.yaml file."""
        logger.debug("Creating default config at %s", self.config_file)
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())
