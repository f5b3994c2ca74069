"""Exceptions raised by the OpenSky API client."""

from __future__ import annotations


class OpenSkyError(Exception):
    """Base class for every error the client raises."""


class ValidationError(OpenSkyError):
    """Raised when request parameters are invalid. No request is sent."""


class TransportError(OpenSkyError):
    """Raised when the request could not be completed (connection, DNS, timeout)."""


class HttpStatusError(OpenSkyError):
    """Raised when the API answers with a status other than 200."""

    def __init__(self, status_code: int, body: str | None = None, url: str | None = None):
        message = f"OpenSky returned HTTP {status_code}"
        if url:
            message = f"{message} for {url}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url


class RateLimitError(HttpStatusError):
    """HTTP 429. ``retry_after`` is the wait in seconds announced by OpenSky, if any."""

    def __init__(
        self,
        status_code: int = 429,
        body: str | None = None,
        url: str | None = None,
        retry_after: float | None = None,
    ):
        super().__init__(status_code, body=body, url=url)
        self.retry_after = retry_after


class DecodeError(OpenSkyError):
    """Raised when a response is not valid JSON or does not match the schema."""


__all__ = [
    "DecodeError",
    "HttpStatusError",
    "OpenSkyError",
    "RateLimitError",
    "TransportError",
    "ValidationError",
]
