"""Default configuration values and file templates."""

from podnotes.config.schema import GlobalConfig

DEFAULT_GLOBAL_CONFIG = GlobalConfig()

DEFAULT_CONFIG_CONTENT = """\
# Podnotes configuration
version: "1"

# Logging level: DEBUG, INFO, WARNING, ERROR
log_level: INFO

# Library location (defaults to the user data directory)
# library_file: ~/notes/podcasts.json

# Default ordering for `podnotes list`:
# date-newest, date-oldest, rating-high, rating-low, duration-long, duration-short
default_sort: date-newest

# Default ordering for `podnotes tags`: frequency or alphabetical
tag_order: frequency

# Maximum rows shown by `podnotes list`
list_limit: 50
"""


def get_default_config_content() -> str:
    """Get the commented default config.yaml content."""
    return DEFAULT_CONFIG_CONTENT
