"""News repository: the only layer the controller talks to for data."""

import logging
from typing import List, Optional, Protocol

from .errors import to_domain_error
from .models import Article

logger = logging.getLogger(__name__)


class NewsSource(Protocol):
    """Anything that can fetch articles, normally NewsAPIClient."""

    async def top_headlines(
        self, language: str, max_count: int, country: Optional[str] = None
    ) -> List[Article]: ...

    async def search(self, query: str, language: str, max_count: int) -> List[Article]: ...


class NewsRepository:
    """Pass-through to the API client that normalizes failures to DomainError."""

    def __init__(self, client: NewsSource) -> None:
        self.client = client

    async def top_headlines(
        self,
        language: str,
        max_count: int,
        country: Optional[str] = None,
    ) -> List[Article]:
        """Fetch top headlines; raises DomainError on failure."""
        try:
            return await self.client.top_headlines(
                language=language, max_count=max_count, country=country
            )
        except Exception as e:
            error = to_domain_error(e)
            logger.warning("Top headlines failed: %s (%s)", error.kind.value, e)
            if error is e:
                raise
            raise error from e

    async def search(self, query: str, language: str, max_count: int) -> List[Article]:
        """Search articles; raises DomainError on failure."""
        try:
            return await self.client.search(query, language=language, max_count=max_count)
        except Exception as e:
            error = to_domain_error(e)
            logger.warning("Search for %r failed: %s (%s)", query, error.kind.value, e)
            if error is e:
                raise
            raise error from e
