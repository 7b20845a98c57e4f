from __future__ import annotations


class ApodProxyError(Exception):
    """Base exception for all APOD proxy errors."""


class ValidationError(ApodProxyError):
    """Raised when query parameters fail validation before any network call."""


class ApiError(ApodProxyError):
    """Raised when the NASA APOD API returns a non-2xx HTTP status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        super().__init__(message or f"NASA API responded {status_code}")


class UpstreamUnavailableError(ApodProxyError):
    """Raised when the NASA APOD API could not be reached at all (timeout, DNS, refused)."""


class InvalidResponseError(ApodProxyError):
    """Raised when the NASA APOD API answers 2xx with a body we cannot use."""
