"""Configuration loader."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel

logger = logging.getLogger(__name__)

BASE_HOST_ENV = "NEWSFLASH_BASE_HOST"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = Path.home() / ".config" / "newsflash" / "config.yaml"
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            try:
                self._config = load_config(self.config_path)
            except FileNotFoundError:
                logger.debug("No config at %s, using defaults", self.config_path)
                self._config = ConfigModel()
        return self._config

    def get_api_config(self) -> Dict[str, Any]:
        """Get API configuration dict with environment overrides applied."""
        api_config = self.config.api.model_dump()

        # Handle token from environment if specified
        if api_config.get("token_env"):
            token = os.environ.get(api_config["token_env"])
            if token:
                api_config["token"] = token

        base_host = os.environ.get(BASE_HOST_ENV)
        if base_host:
            api_config["base_host"] = base_host.strip().rstrip("/")

        return api_config

    @property
    def base_url(self) -> str:
        """Get the HTTPS base URL of the news API."""
        host = self.get_api_config()["base_host"]
        if "://" in host:
            return host
        return f"https://{host}"


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
