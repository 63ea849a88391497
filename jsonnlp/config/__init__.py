"""
Config Module

Settings for the codec layout, validation and logging, loaded from YAML.
"""

from jsonnlp.config.settings import (
    CodecSettings,
    LoggingSettings,
    Settings,
    ValidationSettings,
)
from jsonnlp.config.loader import (
    DEFAULTS_FILE,
    clear_cache,
    get_settings,
    load_settings,
    parse_settings,
)

__all__ = [
    # Models
    "Settings",
    "CodecSettings",
    "ValidationSettings",
    "LoggingSettings",
    # Loading
    "DEFAULTS_FILE",
    "load_settings",
    "parse_settings",
    "get_settings",
    "clear_cache",
]
