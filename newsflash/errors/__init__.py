"""Error taxonomy: raw service errors, domain errors and presentation errors."""

from .domain import DomainError, DomainErrorKind, to_domain_error
from .presentation import PresentationError, PresentationErrorMapper
from .service import (
    APIStatusError,
    AuthRequiredError,
    BadServerResponseError,
    InvalidURLError,
    MissingAPIKeyError,
    NewsServiceError,
    RateLimitedError,
    ResponseDecodingError,
    ServiceFailure,
)

__all__ = [
    "APIStatusError",
    "AuthRequiredError",
    "BadServerResponseError",
    "DomainError",
    "DomainErrorKind",
    "InvalidURLError",
    "MissingAPIKeyError",
    "NewsServiceError",
    "PresentationError",
    "PresentationErrorMapper",
    "RateLimitedError",
    "ResponseDecodingError",
    "ServiceFailure",
    "to_domain_error",
]
