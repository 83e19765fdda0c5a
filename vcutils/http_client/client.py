"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

HTTP client facade.

``HTTPClient`` is the single entry point for issuing requests. Each call
resolves nothing at request time: adapter, serializer, log level and
telemetry listener were resolved when the client was built. A call then

1. corrects swapped ``headers``/``body`` positional arguments,
2. encodes structured bodies with the serializer,
3. runs the adapter,
4. normalizes the result into ``Success`` / ``Failure``,
5. logs the request trail and hands a telemetry event to the listener.

Usage::

    class BillingClient(HTTPClient):
        def auth_headers(self):
            return [("Authorization", f"Bearer {TOKEN}")]

    client = BillingClient()
    outcome = client.get("https://billing.internal/invoices")
    if outcome.ok:
        invoices = outcome.body

Per-client configuration lives under ``http_client.targets`` keyed by the
client name, which defaults to the subclass's ``module.QualName``.
"""

from __future__ import annotations

import time
import warnings
from collections.abc import Mapping
from enum import Enum
from typing import Any, List, Optional, Tuple

from vcutils.config.settings import VCUtilsConfig
from vcutils.exceptions import EncodeError
from vcutils.http_client.adapters.base import (
    AdapterResult,
    Headers,
    Request,
    TransportFailure,
    normalize_headers,
)
from vcutils.http_client.normalizer import process_response
from vcutils.http_client.outcome import Failure, Outcome
from vcutils.http_client.settings import ClientSettings, resolve_settings
from vcutils.http_client.telemetry import TelemetryEvent, get_dispatcher
from vcutils.logging_config import get_logger, log_http_request, log_http_timing

logger = get_logger(__name__)

SWAPPED_ARGUMENTS_WARNING = (
    "Invalid order of arguments, call request(method, url, body, headers, options); "
    "the body and headers arguments were swapped."
)


def _method_name(method: Any) -> str:
    if isinstance(method, Enum):
        method = method.value
    return str(method).upper()


def _looks_like_headers(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(
            isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str)
            for item in value
        )
    )


def _printable(body: Any) -> Any:
    if isinstance(body, (bytes, bytearray)):
        try:
            return bytes(body).decode("utf-8")
        except UnicodeDecodeError:
            return repr(bytes(body))
    return body


class _ClientCore:
    """Request preparation, logging and telemetry shared by sync and async clients."""

    asynchronous = False

    def __init__(
        self,
        name: Optional[str] = None,
        config: Optional[VCUtilsConfig] = None,
        settings: Optional[ClientSettings] = None,
        **overrides: Any,
    ) -> None:
        self.name = name or f"{type(self).__module__}.{type(self).__qualname__}"
        if settings is None:
            settings = resolve_settings(
                self.name, config=config, overrides=overrides, asynchronous=self.asynchronous
            )
        self.settings = settings
        self._dispatcher = get_dispatcher()

    # -- Overridable hooks ---------------------------------------------------

    def auth_headers(self) -> List[Tuple[str, str]]:
        """Headers added to every request. Override in subclasses."""
        return []

    def process_response(self, result: AdapterResult) -> Outcome:
        """Normalize an adapter result. Override to customise classification."""
        return process_response(result, self.settings)

    # -- Request pipeline ----------------------------------------------------

    def _correct_argument_order(self, body: Any, headers: Any) -> Tuple[Any, Any]:
        if _looks_like_headers(body) and (headers is None or isinstance(headers, (str, bytes))):
            logger.warning("swapped_request_arguments", client=self.name)
            warnings.warn(SWAPPED_ARGUMENTS_WARNING, UserWarning, stacklevel=4)
            return headers, body
        return body, headers

    def _merge_headers(self, headers: Any, content_type: Optional[str]) -> Headers:
        caller = normalize_headers(headers)
        given = {name.lower() for name, _ in caller}
        merged = [pair for pair in normalize_headers(self.auth_headers()) if pair[0].lower() not in given]
        merged.extend(caller)
        if content_type and not any(name.lower() == "content-type" for name, _ in merged):
            merged.append(("content-type", content_type))
        return tuple(merged)

    def _prepare(
        self,
        method: Any,
        url: str,
        body: Any,
        headers: Any,
        options: Optional[Mapping[str, Any]],
    ) -> Tuple[Request, Optional[Failure]]:
        body, headers = self._correct_argument_order(body, headers)
        method = _method_name(method)
        serializer = self.settings.serializer
        content_type = None
        failure = None

        if isinstance(body, bytearray):
            body = bytes(body)
        elif body is not None and not isinstance(body, (bytes, str)):
            try:
                body = serializer.encode(body)
                content_type = getattr(serializer, "content_type", None)
            except Exception as e:
                message = f"Error encoding request body: {e!r}"
                logger.error("request_encode_failed", client=self.name, method=method, url=url, error=repr(e))
                exc = EncodeError(message, status=None, body=body)
                exc.__cause__ = e
                failure = Failure(status=None, body=body, message=message, error=exc)

        request = Request(
            method=method,
            url=url,
            body=body,
            headers=self._merge_headers(headers, content_type),
            options=dict(options or {}),
        )
        return request, failure

    def _adapter_crashed(self, request: Request, exc: Exception) -> TransportFailure:
        logger.error(
            "adapter_raised",
            client=self.name,
            method=request.method,
            url=request.url,
            error=repr(exc),
            exc_info=True,
        )
        return TransportFailure(reason=getattr(exc, "reason", None), exception=exc)

    def _finish(self, request: Request, outcome: Outcome, started: float) -> Outcome:
        elapsed = time.monotonic() - started
        level = self.settings.log_level

        if self.settings.logging_enabled:
            log_http_request(
                logger,
                level,
                client=self.name,
                method=request.method,
                url=request.url,
                headers=list(request.headers),
                body=_printable(request.body),
                options=dict(request.options),
                outcome=repr(outcome),
            )

        if self.settings.telemetry_listener is not None:
            event = TelemetryEvent(
                elapsed_ms=round(elapsed * 1000, 3),
                outcome=outcome,
                method=request.method,
                url=request.url,
                body=request.body,
                headers=request.headers,
                options=request.options,
                client=self.name,
            )
            try:
                self._dispatcher.dispatch(self.settings.telemetry_listener, event)
            except Exception as e:
                logger.warning("telemetry_dispatch_failed", client=self.name, error=repr(e))

        if self.settings.logging_enabled:
            log_http_timing(
                logger,
                level,
                client=self.name,
                method=request.method,
                url=request.url,
                elapsed_seconds=elapsed,
            )
        return outcome


class HTTPClient(_ClientCore):
    """
    Synchronous HTTP client returning ``Success`` / ``Failure`` outcomes.

    Args:
        name: Client name for per-target configuration and logs
        config: Configuration to resolve settings from (process-wide when None)
        settings: Pre-resolved settings; skips configuration entirely
        **overrides: Setting overrides (``adapter``, ``serializer``,
            ``log_level``, ``telemetry_listener``, ``keys``)
    """

    def request(
        self,
        method: Any,
        url: str,
        body: Any = None,
        headers: Any = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Outcome:
        """
        Issue one request.

        Args:
            method: HTTP method name or enum member
            url: Absolute URL, or relative to the adapter's base URL
            body: ``bytes``/``str`` sent as-is, anything else encoded
            headers: Sequence of ``(name, value)`` pairs or a mapping
            options: Adapter-specific settings (``timeout``, ``params``...)

        Returns:
            ``Success`` or ``Failure``; never raises for request failures
        """
        started = time.monotonic()
        request, failure = self._prepare(method, url, body, headers, options)
        if failure is not None:
            return self._finish(request, failure, started)

        try:
            result = self.settings.adapter.request(
                request.method, request.url, request.body, request.headers, request.options
            )
        except Exception as e:
            result = self._adapter_crashed(request, e)

        outcome = self.process_response(result)
        return self._finish(request, outcome, started)

    def get(self, url: str, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return self.request("GET", url, None, headers, options)

    def head(self, url: str, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return self.request("HEAD", url, None, headers, options)

    def options(self, url: str, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return self.request("OPTIONS", url, None, headers, options)

    def delete(self, url: str, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return self.request("DELETE", url, None, headers, options)

    def post(self, url: str, body: Any = None, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return self.request("POST", url, body, headers, options)

    def put(self, url: str, body: Any = None, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return self.request("PUT", url, body, headers, options)

    def patch(self, url: str, body: Any = None, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return self.request("PATCH", url, body, headers, options)

    def close(self) -> None:
        """Release the adapter's connections."""
        close = getattr(self.settings.adapter, "close", None)
        if callable(close):
            close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
