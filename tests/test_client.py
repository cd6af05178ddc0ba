"""Tests for newsflash.api.client."""

import asyncio
import logging

import httpx
import pytest

from newsflash.api import APIEndpoint, NewsAPIClient, StaticTokenProvider
from newsflash.api.client import redact_token
from newsflash.errors import (
    AuthRequiredError,
    BadServerResponseError,
    InvalidURLError,
    MissingAPIKeyError,
    RateLimitedError,
    ResponseDecodingError,
    ServiceFailure,
)
from tests.conftest import BASE_URL, RecordingTransport, make_client


class TestRequestFormation:
    def test_top_headlines_builds_path_and_query(self, payload) -> None:
        recorder = RecordingTransport(json=payload)
        client = make_client(recorder)

        asyncio.run(client.top_headlines(language="en", max_count=30, country="us"))

        request = recorder.last_request
        assert request.method == "GET"
        assert request.url.path == "/api/v4/top-headlines"
        assert list(request.url.params.multi_items()) == [
            ("lang", "en"),
            ("max", "30"),
            ("token", "TEST_TOKEN"),
            ("country", "us"),
        ]

    def test_top_headlines_omits_country_when_none(self, payload) -> None:
        recorder = RecordingTransport(json=payload)
        client = make_client(recorder)

        asyncio.run(client.top_headlines(language="de", max_count=50))

        params = recorder.last_request.url.params
        assert "country" not in params
        assert params["lang"] == "de"
        assert params["max"] == "50"

    def test_search_builds_path_and_query(self, payload) -> None:
        recorder = RecordingTransport(json=payload)
        client = make_client(recorder)

        asyncio.run(client.search("swift ui", language="en", max_count=10))

        request = recorder.last_request
        assert request.url.path == "/api/v4/search"
        assert request.url.params["q"] == "swift ui"
        assert request.url.params["lang"] == "en"
        assert request.url.params["max"] == "10"
        assert request.url.params["token"] == "TEST_TOKEN"
        assert "country" not in request.url.params

    def test_requests_bypass_caches(self, payload) -> None:
        recorder = RecordingTransport(json=payload)
        client = make_client(recorder)

        asyncio.run(client.top_headlines())

        headers = recorder.last_request.headers
        assert headers["Cache-Control"] == "no-cache"
        assert headers["Pragma"] == "no-cache"
        assert headers["Accept"] == "application/json"

    def test_build_url_rejects_base_without_host(self) -> None:
        client = NewsAPIClient(base_url="not a url", token_provider=StaticTokenProvider("t"))

        with pytest.raises(InvalidURLError):
            client.build_url(APIEndpoint.SEARCH, [("q", "x")])

    def test_build_url_keeps_base_path(self) -> None:
        client = NewsAPIClient(base_url=BASE_URL + "/", token_provider=StaticTokenProvider("t"))

        url = client.build_url(APIEndpoint.TOP_HEADLINES, [("lang", "en")])

        assert str(url) == "https://news.example.com/api/v4/top-headlines?lang=en"


class TestMissingToken:
    def test_empty_token_fails_without_request(self, payload) -> None:
        recorder = RecordingTransport(json=payload)
        client = make_client(recorder, token="")

        with pytest.raises(MissingAPIKeyError) as exc_info:
            asyncio.run(client.top_headlines())

        assert exc_info.value.reason is ServiceFailure.MISSING_API_KEY
        assert recorder.requests == []

    def test_empty_token_fails_search_without_request(self, payload) -> None:
        recorder = RecordingTransport(json=payload)
        client = make_client(recorder, token="")

        with pytest.raises(MissingAPIKeyError):
            asyncio.run(client.search("swift"))

        assert recorder.requests == []


class TestStatusValidation:
    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_statuses(self, status) -> None:
        client = make_client(RecordingTransport(status_code=status, json={"errors": ["nope"]}))

        with pytest.raises(AuthRequiredError) as exc_info:
            asyncio.run(client.top_headlines())

        assert exc_info.value.status_code == status
        assert exc_info.value.reason is ServiceFailure.AUTH_REQUIRED

    def test_rate_limited(self) -> None:
        client = make_client(RecordingTransport(status_code=429, json={}))

        with pytest.raises(RateLimitedError) as exc_info:
            asyncio.run(client.search("swift"))

        assert exc_info.value.reason is ServiceFailure.RATE_LIMITED

    @pytest.mark.parametrize("status", [301, 400, 404, 500, 503])
    def test_other_non_2xx_is_bad_server_response(self, status) -> None:
        client = make_client(RecordingTransport(status_code=status, content=b""))

        with pytest.raises(BadServerResponseError) as exc_info:
            asyncio.run(client.top_headlines())

        assert exc_info.value.status_code == status

    def test_any_2xx_is_decoded(self, payload) -> None:
        client = make_client(RecordingTransport(status_code=203, json=payload))

        articles = asyncio.run(client.top_headlines())

        assert len(articles) == 2


class TestDecoding:
    def test_returns_articles_in_server_order(self, payload) -> None:
        client = make_client(RecordingTransport(json=payload))

        articles = asyncio.run(client.top_headlines())

        assert [a.title for a in articles] == ["First headline", "Second headline"]
        assert articles[0].url == "https://example.com/1"
        assert articles[0].source.name == "Example News"
        assert articles[0].published_at.year == 2025

    def test_malformed_json(self) -> None:
        client = make_client(RecordingTransport(content=b"<html>oops</html>"))

        with pytest.raises(ResponseDecodingError):
            asyncio.run(client.top_headlines())

    def test_envelope_without_articles(self) -> None:
        client = make_client(RecordingTransport(json={"totalArticles": 3}))

        with pytest.raises(ResponseDecodingError):
            asyncio.run(client.search("swift"))

    def test_article_without_title(self) -> None:
        client = make_client(RecordingTransport(json={"articles": [{"url": "https://x.y"}]}))

        with pytest.raises(ResponseDecodingError):
            asyncio.run(client.top_headlines())

    def test_invalid_date(self, payload) -> None:
        payload["articles"][0]["publishedAt"] = "yesterday-ish"
        client = make_client(RecordingTransport(json=payload))

        with pytest.raises(ResponseDecodingError):
            asyncio.run(client.top_headlines())

    def test_empty_article_list(self) -> None:
        client = make_client(RecordingTransport(json={"totalArticles": 0, "articles": []}))

        assert asyncio.run(client.search("nothing")) == []


class TestTransportErrors:
    def test_connect_error_propagates(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("no route", request=request)

        client = NewsAPIClient(
            base_url=BASE_URL,
            token_provider=StaticTokenProvider("t"),
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(httpx.ConnectError):
            asyncio.run(client.top_headlines())


def test_redact_token() -> None:
    url = "https://h/search?q=x&token=abc123&lang=en"

    assert redact_token(url) == "https://h/search?q=x&token=***&lang=en"


def test_debug_log_redacts_token(caplog, payload) -> None:
    caplog.set_level(logging.DEBUG, logger="newsflash.api.client")
    client = make_client(RecordingTransport(json=payload), token="SECRET123")

    asyncio.run(client.top_headlines())

    messages = [r.getMessage() for r in caplog.records if r.name == "newsflash.api.client"]
    assert messages == [f"GET {BASE_URL}/top-headlines?lang=en&max=30&token=*** -> 200"]
    assert "SECRET123" not in caplog.text


def test_debug_log_redacts_token_on_error_status(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="newsflash.api.client")
    client = make_client(RecordingTransport(status_code=401, json={}), token="SECRET123")

    with pytest.raises(AuthRequiredError):
        asyncio.run(client.search("swift"))

    assert "token=***" in caplog.text
    assert "SECRET123" not in caplog.text
