"""Async client for the GNews-style headlines API."""

import logging
import re
from typing import List, Optional, Sequence, Tuple

import httpx
from pydantic import ValidationError

from ..errors import (
    AuthRequiredError,
    BadServerResponseError,
    InvalidURLError,
    MissingAPIKeyError,
    RateLimitedError,
    ResponseDecodingError,
)
from ..models import Article, ArticlesEnvelope
from .endpoints import APIEndpoint
from .tokens import TokenProvider

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"(token)=[^&\s]+", re.IGNORECASE)

QueryParams = Sequence[Tuple[str, str]]


def redact_token(text: str) -> str:
    """Mask the token query parameter in a URL or log line."""
    return _TOKEN_RE.sub(r"\1=***", text)


class NewsAPIClient:
    """Fetch top headlines and search results."""

    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        user_agent: str = "NewsFlash/0.1",
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Scheme, host and base path of the API, e.g. ``https://gnews.io/api/v4``
            token_provider: Source of the API token
            timeout: Request timeout in seconds
            transport: Custom httpx transport (for testing)
            user_agent: User-Agent header value
        """
        self.base_url = base_url.rstrip("/")
        self.token_provider = token_provider
        self.timeout = timeout
        self.transport = transport
        self.user_agent = user_agent

    def build_url(self, endpoint: APIEndpoint, params: QueryParams) -> httpx.URL:
        """Build the request URL for ``endpoint`` with ``params`` in order."""
        try:
            url = httpx.URL(f"{self.base_url}/{endpoint.value}", params=list(params))
        except (httpx.InvalidURL, TypeError) as e:
            raise InvalidURLError(f"Cannot build URL from {self.base_url!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError(f"Base URL needs a scheme and host: {self.base_url!r}")
        return url

    def _token_or_raise(self) -> str:
        token = self.token_provider.token
        if not token:
            raise MissingAPIKeyError()
        return token

    async def _fetch_articles(self, endpoint: APIEndpoint, params: QueryParams) -> List[Article]:
        url = self.build_url(endpoint, params)
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }

        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=headers,
            transport=self.transport,
        ) as client:
            response = await client.get(url)

        logger.debug(
            "GET %s -> %s", redact_token(str(response.request.url)), response.status_code
        )
        self._check(response)

        try:
            envelope = ArticlesEnvelope.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseDecodingError(
                f"Invalid {endpoint.value} response: {e.error_count()} error(s)"
            ) from e

        return envelope.articles

    @staticmethod
    def _check(response: httpx.Response) -> None:
        """Validate the status code and raise the matching service error."""
        status = response.status_code
        if 200 <= status <= 299:
            return
        if status in (401, 403):
            raise AuthRequiredError(status)
        if status == 429:
            raise RateLimitedError(status)
        raise BadServerResponseError(status)

    async def top_headlines(
        self,
        language: str = "en",
        max_count: int = 30,
        country: Optional[str] = None,
    ) -> List[Article]:
        """
        Fetch the top headlines feed.

        Args:
            language: Two-letter language code
            max_count: Maximum number of articles
            country: Optional two-letter country code

        Returns:
            Articles in server order
        """
        token = self._token_or_raise()
        params = [
            ("lang", language),
            ("max", str(max_count)),
            ("token", token),
        ]
        if country:
            params.append(("country", country))
        return await self._fetch_articles(APIEndpoint.TOP_HEADLINES, params)

    async def search(
        self,
        query: str,
        language: str = "en",
        max_count: int = 10,
    ) -> List[Article]:
        """
        Search articles matching ``query``.

        Args:
            query: Search keywords
            language: Two-letter language code
            max_count: Maximum number of articles

        Returns:
            Articles in server order
        """
        token = self._token_or_raise()
        params = [
            ("q", query),
            ("lang", language),
            ("max", str(max_count)),
            ("token", token),
        ]
        return await self._fetch_articles(APIEndpoint.SEARCH, params)
