"""Custom exceptions for the google-places-api library."""

from typing import Optional


class GooglePlacesError(Exception):
    """Base exception for all google-places-api errors."""
    pass


class ConfigurationError(GooglePlacesError):
    """Raised when configuration is invalid or incomplete (e.g. no API key)."""
    pass


class PreconditionError(GooglePlacesError, ValueError):
    """Raised when a query is misconfigured before any request is sent.

    Examples: a text search with neither query nor type, a nearby search
    without a location, or ``max_pages < 1``. Not retryable.
    """
    pass


class FetchError(GooglePlacesError):
    """Raised when a single HTTP call to the Places API fails."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class TransportError(FetchError):
    """Raised on connection errors, timeouts and non-2xx responses."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, url=url)
        self.status_code = status_code


class DecodeError(FetchError):
    """Raised when a response body does not match the expected schema."""
    pass
