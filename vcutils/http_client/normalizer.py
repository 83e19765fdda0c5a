"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Response normalization.

Turns whatever an adapter produced into an ``Outcome``:

- transport failure -> ``Failure(status=None)``
- 2xx with empty body -> ``Success`` carrying the raw empty body
- 2xx with decodable body -> ``Success`` carrying the decoded body
- 2xx with undecodable body -> ``Failure`` (decode error, raw body kept)
- non-2xx -> ``Failure`` carrying the decoded body, or the raw body when
  it does not decode

Decode errors are reported as values and logged; nothing here raises for
malformed input.
"""

from __future__ import annotations

from collections.abc import Mapping
from pprint import pformat
from typing import TYPE_CHECKING, Any, Optional

from vcutils.exceptions import DecodeError, HTTPError, TransportError
from vcutils.http_client.adapters.base import TransportFailure
from vcutils.http_client.outcome import Failure, Outcome, Success
from vcutils.http_client.serializers import Serializer, get_serializer
from vcutils.logging_config import get_logger

if TYPE_CHECKING:
    from vcutils.http_client.settings import ClientSettings

logger = get_logger(__name__)

_MISSING = object()


def _field(response: Any, name: str, default: Any = None) -> Any:
    if isinstance(response, Mapping):
        return response.get(name, default)
    return getattr(response, name, default)


def _has_field(response: Any, name: str) -> bool:
    return _field(response, name, _MISSING) is not _MISSING


def _is_empty(body: Any) -> bool:
    return body is None or (isinstance(body, (bytes, bytearray, str)) and len(body) == 0)


def _describe(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return repr(bytes(value))
    if isinstance(value, str):
        return value
    return pformat(value)


def is_success_status(status: Any) -> bool:
    """Whether ``status`` is an integer in [200, 299]."""
    return isinstance(status, int) and not isinstance(status, bool) and 200 <= status <= 299


def _transport_failure(error: Any) -> Failure:
    reason = getattr(error, "reason", None)
    exception = getattr(error, "exception", None)
    if not isinstance(error, TransportFailure) and isinstance(error, BaseException):
        exception = error

    if reason is not None:
        message = f"Error making request: {_describe(reason)}"
        body = None
    else:
        detail = exception if exception is not None else error
        message = f"Error making request: {detail!r}"
        body = {"error": detail}

    exc = TransportError(message, status=None, body=body)
    if exception is not None:
        exc.__cause__ = exception
    return Failure(status=None, body=body, message=message, error=exc)


def _decode_failure_message(raw_body: Any, error: Optional[Exception]) -> str:
    return f"Error decoding response: \n{_describe(raw_body)}\n\n{error!r}"


def normalize(
    result: Any,
    serializer: Optional[Serializer] = None,
    keys: str = "atoms",
) -> Outcome:
    """
    Classify an adapter result and decode its body.

    Args:
        result: ``RawResponse``, ``TransportFailure``, a transport exception,
            or any object/mapping exposing ``status`` (or ``status_code``)
            and ``body``
        serializer: Codec used to decode bodies (default: JSON)
        keys: ``"atoms"`` for attribute-style mappings, ``"strings"`` for plain dicts

    Returns:
        ``Success`` or ``Failure``; never raises for malformed bodies
    """
    if isinstance(result, (TransportFailure, BaseException)):
        return _transport_failure(result)

    if serializer is None:
        serializer = get_serializer("json")

    status = _field(result, "status")
    if status is None:
        status = _field(result, "status_code")
    raw_body = _field(result, "body")

    if status is None:
        # Unclassified result: keep whatever is available
        body = {name: _field(result, name) for name in ("body", "status", "status_code") if _has_field(result, name)}
        message = "Unrecognised adapter result"
        return Failure(
            status=None,
            body=body or result,
            message=message,
            error=HTTPError(message, status=None, body=body or result),
        )

    if _is_empty(raw_body):
        if is_success_status(status):
            return Success(status=status, body=raw_body)
        message = f"Request failed with status {status}"
        return Failure(
            status=status,
            body=raw_body,
            error=HTTPError(message, status=status, body=raw_body),
        )

    decoded = serializer.try_decode(raw_body, keys=keys)

    if is_success_status(status):
        if decoded.ok:
            return Success(status=status, body=decoded.value)
        message = _decode_failure_message(raw_body, decoded.error)
        logger.error(
            "response_decode_failed",
            status=status,
            body=_describe(raw_body),
            error=repr(decoded.error),
        )
        exc = DecodeError(message, status=status, body=raw_body)
        exc.__cause__ = decoded.error
        return Failure(status=status, body=raw_body, message=message, error=exc)

    if decoded.ok:
        return Failure(
            status=status,
            body=decoded.value,
            error=HTTPError(
                f"Request failed with status {status}", status=status, body=decoded.value
            ),
        )

    # Error bodies are decoded best-effort; keep the raw body
    message = _decode_failure_message(raw_body, decoded.error)
    logger.error(
        "error_response_decode_failed",
        status=status,
        body=_describe(raw_body),
        error=repr(decoded.error),
    )
    exc = DecodeError(message, status=status, body=raw_body)
    exc.__cause__ = decoded.error
    return Failure(status=status, body=raw_body, message=message, error=exc)


def process_response(result: Any, settings: Optional["ClientSettings"] = None) -> Outcome:
    """
    Normalize ``result`` with the serializer and key mode from ``settings``.

    This is the hook the HTTP client calls after every adapter round trip;
    client subclasses override ``HTTPClient.process_response`` to customise it.
    """
    if settings is None:
        return normalize(result)
    return normalize(result, serializer=settings.serializer, keys=settings.keys)
