"""
Settings Loader — Load jsonnlp settings from YAML files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from jsonnlp.config.settings import Settings
from jsonnlp.core.logging import LogChannel, get_logger
from jsonnlp.errors import ConfigError

# Settings shipped with the package
DEFAULTS_FILE = Path(__file__).parent / "defaults.yaml"

log = get_logger(LogChannel.CONFIG)

_default_settings: Optional[Settings] = None


def load_settings(path: Union[Path, str, None] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        path: Settings file (defaults to the packaged defaults.yaml)

    Returns:
        Parsed Settings; sections missing from the file keep their defaults

    Raises:
        ConfigError: If the file is missing, is not YAML, or has unknown
            or mistyped keys
    """
    path = Path(path) if path is not None else DEFAULTS_FILE

    if not path.exists():
        raise ConfigError(f"Settings file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read settings file {path}: {exc}") from exc

    return parse_settings(data, source=str(path))


def parse_settings(data: Optional[dict], source: str = "<dict>") -> Settings:
    """Build Settings from an already-parsed mapping."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings in {source} must be a mapping, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {source}: {exc}") from exc

    log.verbose("settings_loaded", source=source, sections=sorted(data))
    return settings


def get_settings() -> Settings:
    """Return the packaged default settings, loading them once."""
    global _default_settings
    if _default_settings is None:
        _default_settings = load_settings()
    return _default_settings


def clear_cache() -> None:
    """Forget cached default settings."""
    global _default_settings
    _default_settings = None
