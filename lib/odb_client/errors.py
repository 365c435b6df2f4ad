from __future__ import annotations


class OdbClientError(Exception):
    """Base client error."""


class ValidationError(OdbClientError, ValueError):
    """Request input rejected before any network call."""


class NetworkError(OdbClientError):
    """Transport/network layer error."""


class HTTPStatusError(OdbClientError):
    def __init__(self, status_code: int, reason: str, details: str | None = None):
        super().__init__(reason)
        self.status_code = status_code
        self.reason = reason
        self.details = details


class DecodeError(OdbClientError):
    """Response body does not match the requested shape."""
