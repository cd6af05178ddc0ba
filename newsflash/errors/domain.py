"""Domain error taxonomy and the raw error classifier."""

import json
from enum import Enum

import httpx
from pydantic import ValidationError

from .service import (
    AuthRequiredError,
    BadServerResponseError,
    InvalidURLError,
    MissingAPIKeyError,
    RateLimitedError,
    ResponseDecodingError,
)

# No connection or connection lost mid-request
_CONNECTIVITY_ERRORS = (
    httpx.ConnectError,
    httpx.ReadError,
    httpx.WriteError,
    httpx.RemoteProtocolError,
)


class DomainErrorKind(str, Enum):
    """Failure categories the rest of the app understands."""

    AUTH_REQUIRED = "auth_required"
    RATE_LIMITED = "rate_limited"
    NETWORK_UNAVAILABLE = "network_unavailable"
    INVALID_RESPONSE = "invalid_response"
    DECODING_FAILED = "decoding_failed"
    UNKNOWN = "unknown"


class DomainError(Exception):
    """A fetch failure normalized to a domain category."""

    def __init__(self, kind: DomainErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DomainError):
            return self.kind is other.kind
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)


def _kind_for_status(status_code: int) -> DomainErrorKind:
    if status_code in (401, 403):
        return DomainErrorKind.AUTH_REQUIRED
    if status_code == 429:
        return DomainErrorKind.RATE_LIMITED
    return DomainErrorKind.INVALID_RESPONSE


def classify(error: BaseException) -> DomainErrorKind:
    """Map a raw client, transport or decoding error to a domain category."""
    if isinstance(error, DomainError):
        return error.kind
    if isinstance(error, (AuthRequiredError, MissingAPIKeyError)):
        return DomainErrorKind.AUTH_REQUIRED
    if isinstance(error, RateLimitedError):
        return DomainErrorKind.RATE_LIMITED
    if isinstance(error, (BadServerResponseError, InvalidURLError)):
        return DomainErrorKind.INVALID_RESPONSE
    if isinstance(error, (ResponseDecodingError, ValidationError, json.JSONDecodeError)):
        return DomainErrorKind.DECODING_FAILED
    if isinstance(error, httpx.HTTPStatusError):
        return _kind_for_status(error.response.status_code)
    if isinstance(error, _CONNECTIVITY_ERRORS):
        return DomainErrorKind.NETWORK_UNAVAILABLE
    return DomainErrorKind.UNKNOWN


def to_domain_error(error: BaseException) -> DomainError:
    """Wrap ``error`` as a DomainError, returning it as-is if it already is one."""
    if isinstance(error, DomainError):
        return error
    return DomainError(classify(error))
