"""News API client."""

from .client import NewsAPIClient
from .endpoints import APIEndpoint
from .tokens import EnvTokenProvider, StaticTokenProvider, TokenProvider

__all__ = [
    "APIEndpoint",
    "EnvTokenProvider",
    "NewsAPIClient",
    "StaticTokenProvider",
    "TokenProvider",
]
