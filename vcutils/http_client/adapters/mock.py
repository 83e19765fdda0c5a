"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Mock transport adapters for local testing.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple, Union

from vcutils.http_client.adapters.base import (
    AdapterResult,
    AsyncBaseAdapter,
    BaseAdapter,
    Headers,
    RawResponse,
    Request,
)

MockRoutes = Dict[Tuple[str, str], AdapterResult]

NOT_MOCKED_BODY = b'{"error": "not mocked"}'


class _MockRoutesMixin:
    def __init__(self, responses: Optional[MockRoutes] = None) -> None:
        self._responses: MockRoutes = {
            (method.upper(), url): result for (method, url), result in (responses or {}).items()
        }
        self._sent: list[Request] = []

    def add_response(self, method: str, url: str, result: AdapterResult) -> None:
        """Register (or replace) the result returned for ``(method, url)``."""
        self._responses[(method.upper(), url)] = result

    def _record(
        self,
        method: str,
        url: str,
        body: Optional[Union[bytes, str]],
        headers: Headers,
        options: Optional[Mapping[str, Any]],
    ) -> AdapterResult:
        self._sent.append(
            Request(method=method.upper(), url=url, body=body, headers=tuple(headers), options=dict(options or {}))
        )
        key = (method.upper(), url)
        if key in self._responses:
            return self._responses[key]
        return RawResponse(status=404, body=NOT_MOCKED_BODY)

    @property
    def sent_requests(self) -> list[Request]:
        """All requests that have been sent through this adapter."""
        return list(self._sent)


class MockAdapter(_MockRoutesMixin, BaseAdapter):
    """In-memory mock adapter for unit tests.

    Args:
        responses: Mapping from ``(method, url)`` tuples to a ``RawResponse``
            or ``TransportFailure``.

    Example::

        adapter = MockAdapter({
            ("GET", "https://api.test/posts"): RawResponse(status=200, body=b"[]"),
            ("GET", "https://api.test/slow"): TransportFailure(reason="timeout"),
        })
    """

    def request(
        self,
        method: str,
        url: str,
        body: Optional[Union[bytes, str]] = None,
        headers: Headers = (),
        options: Optional[Mapping[str, Any]] = None,
    ) -> AdapterResult:
        return self._record(method, url, body, headers, options)

    def close(self) -> None:
        self._responses.clear()
        self._sent.clear()

    @property
    def is_connected(self) -> bool:
        return True


class AsyncMockAdapter(_MockRoutesMixin, AsyncBaseAdapter):
    """Asyncio flavour of ``MockAdapter``."""

    async def request(
        self,
        method: str,
        url: str,
        body: Optional[Union[bytes, str]] = None,
        headers: Headers = (),
        options: Optional[Mapping[str, Any]] = None,
    ) -> AdapterResult:
        return self._record(method, url, body, headers, options)

    async def aclose(self) -> None:
        self._responses.clear()
        self._sent.clear()

    @property
    def is_connected(self) -> bool:
        return True
