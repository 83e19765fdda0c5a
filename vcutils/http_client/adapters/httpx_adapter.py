"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

HTTP transport adapters over httpx (default).
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

import httpx

from vcutils.http_client.adapters.base import (
    AdapterResult,
    AsyncBaseAdapter,
    BaseAdapter,
    Headers,
    RawResponse,
    TransportFailure,
)
from vcutils.logging_config import get_logger

logger = get_logger(__name__)

# Per-request options forwarded to httpx; everything else is ignored
FORWARDED_OPTIONS = ("params", "timeout", "follow_redirects", "cookies", "auth", "extensions")

DEFAULT_TIMEOUT = 30.0
DEFAULT_LIMITS = httpx.Limits(max_connections=100, max_keepalive_connections=20)


def _request_kwargs(
    body: Optional[Union[bytes, str]],
    headers: Headers,
    options: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {"headers": list(headers)}
    if body is not None:
        kwargs["content"] = body
    for key, value in (options or {}).items():
        if key in FORWARDED_OPTIONS:
            kwargs[key] = value
        else:
            logger.debug("httpx_option_ignored", option=key)
    return kwargs


def _to_raw_response(response: httpx.Response) -> RawResponse:
    return RawResponse(
        status=response.status_code,
        body=response.content,
        headers=tuple(response.headers.multi_items()),
    )


def _to_transport_failure(exc: Exception) -> TransportFailure:
    if isinstance(exc, httpx.TimeoutException):
        reason: Any = "timeout"
    elif isinstance(exc, httpx.ConnectError):
        reason = "connect_error"
    else:
        reason = str(exc) or type(exc).__name__
    return TransportFailure(reason=reason, exception=exc)


class HttpxAdapter(BaseAdapter):
    """Default HTTP transport using a pooled ``httpx.Client``.

    The client is created lazily on first use and keeps connections alive
    between calls; pool sizing is left to ``httpx.Limits``.

    Args:
        base_url: Optional root URL prepended to relative request URLs.
        timeout: Default request timeout in seconds.
        limits: Connection pool limits.
        **client_kwargs: Extra keyword arguments for ``httpx.Client``
            (``transport``, ``verify``, ``http2``...).
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        limits: Optional[httpx.Limits] = None,
        **client_kwargs: Any,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._limits = limits or DEFAULT_LIMITS
        self._client_kwargs = client_kwargs
        self._client: Optional[httpx.Client] = None
        self._connected = False

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                limits=self._limits,
                **self._client_kwargs,
            )
            self._connected = True
        return self._client

    def request(
        self,
        method: str,
        url: str,
        body: Optional[Union[bytes, str]] = None,
        headers: Headers = (),
        options: Optional[Mapping[str, Any]] = None,
    ) -> AdapterResult:
        client = self._ensure_client()
        try:
            response = client.request(method, url, **_request_kwargs(body, headers, options))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("httpx_transport_error", method=method, url=url, error=str(exc))
            return _to_transport_failure(exc)
        return _to_raw_response(response)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected


class AsyncHttpxAdapter(AsyncBaseAdapter):
    """Asyncio HTTP transport using a pooled ``httpx.AsyncClient``.

    Args:
        base_url: Optional root URL prepended to relative request URLs.
        timeout: Default request timeout in seconds.
        limits: Connection pool limits.
        **client_kwargs: Extra keyword arguments for ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        limits: Optional[httpx.Limits] = None,
        **client_kwargs: Any,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._limits = limits or DEFAULT_LIMITS
        self._client_kwargs = client_kwargs
        self._client: Optional[httpx.AsyncClient] = None
        self._connected = False

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                limits=self._limits,
                **self._client_kwargs,
            )
            self._connected = True
        return self._client

    async def request(
        self,
        method: str,
        url: str,
        body: Optional[Union[bytes, str]] = None,
        headers: Headers = (),
        options: Optional[Mapping[str, Any]] = None,
    ) -> AdapterResult:
        client = self._ensure_client()
        try:
            response = await client.request(method, url, **_request_kwargs(body, headers, options))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("httpx_transport_error", method=method, url=url, error=str(exc))
            return _to_transport_failure(exc)
        return _to_raw_response(response)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected
