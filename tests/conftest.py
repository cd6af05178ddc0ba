"""Shared fixtures and test doubles."""

import asyncio
from typing import Any, Dict, List, Optional

import httpx
import pytest

from newsflash.api import NewsAPIClient, StaticTokenProvider
from newsflash.models import Article

BASE_URL = "https://news.example.com/api/v4"


def article_json(
    title: str = "Swift 6 released",
    url: Optional[str] = "https://example.com/swift-6",
    **overrides: Any,
) -> Dict[str, Any]:
    data = {
        "title": title,
        "description": f"{title} - description",
        "content": f"{title} - content",
        "url": url,
        "image": "https://example.com/image.jpg",
        "publishedAt": "2025-09-04T10:00:00Z",
        "source": {"name": "Example News", "url": "https://example.com"},
    }
    data.update(overrides)
    return data


def make_article(title: str = "Swift 6 released", **overrides: Any) -> Article:
    return Article.model_validate(article_json(title, **overrides))


@pytest.fixture
def payload() -> Dict[str, Any]:
    return {
        "totalArticles": 2,
        "articles": [
            article_json("First headline", url="https://example.com/1"),
            article_json("Second headline", url="https://example.com/2"),
        ],
    }


class RecordingTransport:
    """Collect requests and answer each with the same canned response."""

    def __init__(self, status_code: int = 200, json: Any = None, content: bytes = b"") -> None:
        self.status_code = status_code
        self.json = json
        self.content = content
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.json is not None:
            return httpx.Response(self.status_code, json=self.json)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def make_client(recorder: RecordingTransport, token: str = "TEST_TOKEN") -> NewsAPIClient:
    return NewsAPIClient(
        base_url=BASE_URL,
        token_provider=StaticTokenProvider(token),
        transport=httpx.MockTransport(recorder),
    )


class FakeRepository:
    """
    Repository double recording calls.

    ``script`` is consumed one entry per call: ``(delay, result)`` where result
    is a list of articles or an exception to raise. When the script is empty
    every call returns ``articles`` (or raises ``error``).
    """

    def __init__(
        self,
        articles: Optional[List[Article]] = None,
        error: Optional[Exception] = None,
        script: Optional[list] = None,
    ) -> None:
        self.articles = articles or []
        self.error = error
        self.script = list(script or [])
        self.calls: List[tuple] = []

    async def top_headlines(
        self, language: str, max_count: int, country: Optional[str] = None
    ) -> List[Article]:
        self.calls.append(("top_headlines", None, language, max_count, country))
        return await self._respond()

    async def search(self, query: str, language: str, max_count: int) -> List[Article]:
        self.calls.append(("search", query, language, max_count, None))
        return await self._respond()

    async def _respond(self) -> List[Article]:
        if self.script:
            delay, result = self.script.pop(0)
            await asyncio.sleep(delay)
            if isinstance(result, Exception):
                raise result
            return list(result)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return list(self.articles)
