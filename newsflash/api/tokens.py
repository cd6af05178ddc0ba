"""API token sources."""

import os
from abc import ABC, abstractmethod


class TokenProvider(ABC):
    """Supplies the API token, so tests and CI can swap the source."""

    @property
    @abstractmethod
    def token(self) -> str:
        """Current token, or an empty string when none is configured."""
        pass


class EnvTokenProvider(TokenProvider):
    """Read the token from an environment variable on every request."""

    def __init__(self, env_var: str = "GNEWS_API_KEY") -> None:
        self.env_var = env_var

    @property
    def token(self) -> str:
        return os.environ.get(self.env_var, "").strip()


class StaticTokenProvider(TokenProvider):
    """Fixed token, e.g. resolved from the config file."""

    def __init__(self, token: str = "") -> None:
        self._token = token or ""

    @property
    def token(self) -> str:
        return self._token
