"""Configuration management for NewsFlash."""

from .loader import Config, load_config, save_config
from .models import ApiConfig, ConfigModel, FeedConfig

__all__ = [
    "ApiConfig",
    "Config",
    "ConfigModel",
    "FeedConfig",
    "load_config",
    "save_config",
]
