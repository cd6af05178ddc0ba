"""Endpoints supported by the news API."""

from enum import Enum


class APIEndpoint(str, Enum):
    """Path segment appended to the base URL."""

    TOP_HEADLINES = "top-headlines"
    SEARCH = "search"
