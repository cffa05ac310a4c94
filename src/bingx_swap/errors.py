"""Typed errors raised by the BingX client."""

from __future__ import annotations

__all__ = [
    "BingXError",
    "ConfigurationError",
    "ParameterError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
]


class BingXError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(BingXError, ValueError):
    """Raised at construction when credentials are missing or empty."""


class ParameterError(BingXError, ValueError):
    """Raised when a parameter value cannot be rendered on the wire."""


class TransportError(BingXError):
    """Raised when the HTTP call itself fails (connect, read, timeout)."""


class ProtocolError(BingXError):
    """Raised when the venue answers with a status other than 200."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"unexpected status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(BingXError):
    """Raised when a 200 response body is not the expected JSON shape."""

    def __init__(self, message: str, body: str) -> None:
        super().__init__(message)
        self.body = body
