"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Asyncio HTTP client facade.

Same contract as ``HTTPClient`` with ``async def request``; the adapter is
resolved against the asyncio registry (default ``AsyncHttpxAdapter``).
Telemetry is still delivered on the background worker pool, so a slow
listener never holds up the event loop.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any, Optional

from vcutils.http_client.client import _ClientCore
from vcutils.http_client.outcome import Outcome


class AsyncHTTPClient(_ClientCore):
    """
    Asyncio HTTP client returning ``Success`` / ``Failure`` outcomes.

    Args:
        name: Client name for per-target configuration and logs
        config: Configuration to resolve settings from (process-wide when None)
        settings: Pre-resolved settings; skips configuration entirely
        **overrides: Setting overrides
    """

    asynchronous = True

    async def request(
        self,
        method: Any,
        url: str,
        body: Any = None,
        headers: Any = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Outcome:
        started = time.monotonic()
        request, failure = self._prepare(method, url, body, headers, options)
        if failure is not None:
            return self._finish(request, failure, started)

        try:
            result = await self.settings.adapter.request(
                request.method, request.url, request.body, request.headers, request.options
            )
        except Exception as e:
            result = self._adapter_crashed(request, e)

        outcome = self.process_response(result)
        return self._finish(request, outcome, started)

    async def get(self, url: str, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("GET", url, None, headers, options)

    async def head(self, url: str, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("HEAD", url, None, headers, options)

    async def options(self, url: str, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("OPTIONS", url, None, headers, options)

    async def delete(self, url: str, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("DELETE", url, None, headers, options)

    async def post(self, url: str, body: Any = None, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("POST", url, body, headers, options)

    async def put(self, url: str, body: Any = None, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("PUT", url, body, headers, options)

    async def patch(self, url: str, body: Any = None, headers: Any = None, options: Optional[Mapping[str, Any]] = None) -> Outcome:
        return await self.request("PATCH", url, body, headers, options)

    async def aclose(self) -> None:
        """Release the adapter's connections."""
        aclose = getattr(self.settings.adapter, "aclose", None)
        if callable(aclose):
            await aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False
