"""Errors raised by the news API client."""

from enum import Enum
from typing import Optional


class ServiceFailure(str, Enum):
    """Reason a request to the news API failed."""

    MISSING_API_KEY = "missing_api_key"
    INVALID_URL = "invalid_url"
    AUTH_REQUIRED = "auth_required"
    RATE_LIMITED = "rate_limited"
    BAD_SERVER_RESPONSE = "bad_server_response"
    DECODING_FAILED = "decoding_failed"


class NewsServiceError(Exception):
    """Base class for news API client errors."""

    reason: ServiceFailure

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.reason.value.replace("_", " "))


class MissingAPIKeyError(NewsServiceError):
    """No API token is configured; no request was sent."""

    reason = ServiceFailure.MISSING_API_KEY


class InvalidURLError(NewsServiceError):
    """The request URL could not be built from the configured base URL."""

    reason = ServiceFailure.INVALID_URL


class APIStatusError(NewsServiceError):
    """The API answered with a non-2xx status."""

    reason = ServiceFailure.BAD_SERVER_RESPONSE

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code}")


class AuthRequiredError(APIStatusError):
    """401 or 403: the token is missing, invalid or not allowed."""

    reason = ServiceFailure.AUTH_REQUIRED


class RateLimitedError(APIStatusError):
    """429: the daily or per-second quota is exhausted."""

    reason = ServiceFailure.RATE_LIMITED


class BadServerResponseError(APIStatusError):
    """Any other non-2xx status."""

    reason = ServiceFailure.BAD_SERVER_RESPONSE


class ResponseDecodingError(NewsServiceError):
    """The response body is not a valid articles envelope."""

    reason = ServiceFailure.DECODING_FAILED
