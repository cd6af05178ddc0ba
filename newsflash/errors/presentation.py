"""User-facing error categories."""

import json
from enum import Enum

from pydantic import ValidationError

from .domain import DomainError, DomainErrorKind
from .service import ResponseDecodingError

_MESSAGES = {
    "missing_auth": "Missing or invalid API key. Set GNEWS_API_KEY and try again.",
    "rate_limited": "Too many requests. Please wait a moment and try again.",
    "network_unavailable": "No internet connection. Check your network and try again.",
    "invalid_response": "The news service returned an unexpected response.",
    "unknown": "Unable to load news.",
}

_TITLES = {
    "missing_auth": "Authentication Required",
    "rate_limited": "Rate Limited",
    "network_unavailable": "You're Offline",
    "invalid_response": "Invalid Response",
    "unknown": "Unable to Load News",
}


class PresentationError(str, Enum):
    """Coarse error category shown to the user."""

    MISSING_AUTH = "missing_auth"
    RATE_LIMITED = "rate_limited"
    NETWORK_UNAVAILABLE = "network_unavailable"
    INVALID_RESPONSE = "invalid_response"
    UNKNOWN = "unknown"

    @property
    def message(self) -> str:
        return _MESSAGES[self.value]

    @property
    def title(self) -> str:
        return _TITLES[self.value]


_BY_DOMAIN_KIND = {
    DomainErrorKind.AUTH_REQUIRED: PresentationError.MISSING_AUTH,
    DomainErrorKind.RATE_LIMITED: PresentationError.RATE_LIMITED,
    DomainErrorKind.NETWORK_UNAVAILABLE: PresentationError.NETWORK_UNAVAILABLE,
    DomainErrorKind.INVALID_RESPONSE: PresentationError.INVALID_RESPONSE,
    DomainErrorKind.DECODING_FAILED: PresentationError.INVALID_RESPONSE,
    DomainErrorKind.UNKNOWN: PresentationError.UNKNOWN,
}


class PresentationErrorMapper:
    """Map errors reaching the controller to presentation categories."""

    def map_kind(self, kind: DomainErrorKind) -> PresentationError:
        """Narrow a domain category. Total over DomainErrorKind."""
        return _BY_DOMAIN_KIND[kind]

    def map(self, error: BaseException) -> PresentationError:
        """Map any exception; non-domain errors fall back to decoding or unknown."""
        if isinstance(error, DomainError):
            return self.map_kind(error.kind)
        if isinstance(error, (ResponseDecodingError, ValidationError, json.JSONDecodeError)):
            return PresentationError.INVALID_RESPONSE
        return PresentationError.UNKNOWN
