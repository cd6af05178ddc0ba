"""Topic chips shown above the headlines list."""

from enum import Enum
from typing import Optional


class Topic(str, Enum):
    """Predefined search topics."""

    TECHNOLOGY = "technology"
    APPLE = "apple"
    AI = "ai"
    IOS = "ios"
    SWIFT = "swift"
    BUSINESS = "business"
    SCIENCE = "science"
    HEALTH = "health"
    SPORTS = "sports"
    ENTERTAINMENT = "entertainment"
    POLITICS = "politics"
    CLIMATE = "climate"

    @property
    def query_value(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES.get(self.value, self.value.title())

    @classmethod
    def from_query(cls, normalized_query: str) -> Optional["Topic"]:
        """Topic whose value equals the normalized query, if any."""
        try:
            return cls(normalized_query)
        except ValueError:
            return None


_DISPLAY_NAMES = {
    "ai": "AI",
    "ios": "iOS",
}
