"""
Domain specific exception hierarchy for the twitter_rest package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from twitter_rest.rate_limit import RateLimitStatus


class TwitterClientError(Exception):
    """Base exception for all library errors."""


class ConfigurationError(TwitterClientError):
    """Raised when required configuration or credentials are missing."""


class InvalidArgumentError(TwitterClientError, ValueError):
    """Raised when a call is rejected before any network I/O."""


class TransportError(TwitterClientError):
    """Raised when the HTTP request could not be completed."""


class OAuthError(TwitterClientError):
    """Raised when a step of the OAuth handshake is rejected."""


AuthenticationError = OAuthError


class ApiResponseError(TwitterClientError):
    """Raised when the Twitter API answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        status_code: int | None = None,
        request: str | None = None,
        body: bytes = b"",
        rate_limit: "RateLimitStatus | None" = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.request = request
        self.body = body
        self.rate_limit = rate_limit


class RateLimitExceeded(ApiResponseError):
    """Raised when the Twitter API enforces a rate limit."""

    def __init__(self, message: str, *, reset_at: int | None = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.reset_at = reset_at


class DecodeError(TwitterClientError):
    """Raised when a successful response body is not valid JSON."""

    def __init__(self, message: str, *, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body


class MediaValidationError(TwitterClientError):
    """Raised when local media files do not satisfy upload requirements."""
