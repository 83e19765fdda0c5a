"""
Exception hierarchy for VCUtils.

All custom exceptions inherit from VCUtilsError base class.

The HTTP client never raises the ``HTTPClientError`` family past its
request boundary; those types travel inside ``Failure`` outcomes and are
only raised when a caller asks for it with ``Outcome.unwrap()``.
"""

from typing import Any, Optional


class VCUtilsError(Exception):
    """Base exception for all VCUtils errors."""
    pass


# Configuration Errors
class ConfigurationError(VCUtilsError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


class AdapterError(ConfigurationError):
    """Raised when a transport adapter cannot be resolved or instantiated."""
    pass


class SerializerError(ConfigurationError):
    """Raised when a serializer cannot be resolved or instantiated."""
    pass


class TelemetryListenerError(ConfigurationError):
    """Raised when a telemetry listener cannot be resolved."""
    pass


# HTTP Client Errors
class HTTPClientError(VCUtilsError):
    """
    Base exception for request failures.

    Attributes:
        status: HTTP status code, or None when no response was received
        body: Decoded body when available, otherwise the raw body
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body


class TransportError(HTTPClientError):
    """Raised when the adapter could not complete the exchange (DNS, refused, timeout)."""
    pass


class DecodeError(HTTPClientError):
    """Raised when a response body is present but the serializer rejected it."""
    pass


class HTTPError(HTTPClientError):
    """Raised for a well-formed response with a non-2xx status."""
    pass


class EncodeError(HTTPClientError):
    """Raised when a structured request body could not be encoded."""
    pass
