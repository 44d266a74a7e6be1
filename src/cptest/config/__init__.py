"""Configuration loading for cptest."""

from .loader import DEFAULT_CONFIG_FILENAME, default_config_paths, load_config, write_default_config
from .models import CptestConfig, LanguageCommands, default_config

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "CptestConfig",
    "LanguageCommands",
    "default_config",
    "default_config_paths",
    "load_config",
    "write_default_config",
]
