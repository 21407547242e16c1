"""Configuration module for novaroute."""

from novaroute.config.loader import get_config_path, load_config, save_config
from novaroute.config.schema import ClassifierConfig, Config, LoggingConfig, ProviderConfig

__all__ = [
    "Config",
    "ClassifierConfig",
    "LoggingConfig",
    "ProviderConfig",
    "load_config",
    "save_config",
    "get_config_path",
]
