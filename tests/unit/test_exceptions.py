"""
Unit tests for exception hierarchy.
"""

import pytest

from vcutils.exceptions import (
    AdapterError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    HTTPClientError,
    HTTPError,
    InvalidConfigurationError,
    SerializerError,
    TelemetryListenerError,
    TransportError,
    VCUtilsError,
)


class TestExceptionHierarchy:
    """Test that exception hierarchy is correctly defined."""

    def test_base_exception(self):
        """Test that VCUtilsError is the base exception."""
        error = VCUtilsError("test error")
        assert isinstance(error, Exception)
        assert str(error) == "test error"

    @pytest.mark.parametrize(
        "exc_class",
        [InvalidConfigurationError, AdapterError, SerializerError, TelemetryListenerError],
    )
    def test_configuration_errors(self, exc_class):
        assert issubclass(exc_class, ConfigurationError)
        assert issubclass(exc_class, VCUtilsError)

    @pytest.mark.parametrize("exc_class", [TransportError, DecodeError, HTTPError, EncodeError])
    def test_request_errors(self, exc_class):
        assert issubclass(exc_class, HTTPClientError)
        assert not issubclass(exc_class, ConfigurationError)


class TestHTTPClientError:
    def test_carries_status_and_body(self):
        error = HTTPError("Request failed", status=404, body={"error": "not found"})
        assert str(error) == "Request failed"
        assert error.message == "Request failed"
        assert error.status == 404
        assert error.body == {"error": "not found"}

    def test_defaults(self):
        error = TransportError("Error making request: timeout")
        assert error.status is None
        assert error.body is None

    def test_can_be_caught_as_base(self):
        with pytest.raises(VCUtilsError):
            raise DecodeError("bad body", status=200, body=b"x")
