"""Signed REST client for the BingX perpetual swap API."""

from __future__ import annotations

from bingx_swap.client import BingXClient
from bingx_swap.errors import (
    BingXError,
    ConfigurationError,
    DecodeError,
    ParameterError,
    ProtocolError,
    TransportError,
)
from bingx_swap.settings import Settings

__all__ = [
    "BingXClient",
    "BingXError",
    "ConfigurationError",
    "DecodeError",
    "ParameterError",
    "ProtocolError",
    "Settings",
    "TransportError",
]
