"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Transport Adapters.

Adapters are selected through configuration by name (``"httpx"``,
``"requests"``, ``"mock"``), by dotted import path, or by passing a class
or instance directly.
"""

from typing import Any, Dict, Union

from vcutils.exceptions import AdapterError
from vcutils.http_client.adapters.base import (
    AdapterResult,
    AsyncBaseAdapter,
    BaseAdapter,
    RawResponse,
    Request,
    TransportFailure,
    normalize_headers,
)
from vcutils.http_client.adapters.httpx_adapter import AsyncHttpxAdapter, HttpxAdapter
from vcutils.http_client.adapters.mock import AsyncMockAdapter, MockAdapter
from vcutils.http_client.adapters.requests_adapter import RequestsAdapter
from vcutils.utils import import_string

ADAPTERS: Dict[str, type] = {
    "httpx": HttpxAdapter,
    "requests": RequestsAdapter,
    "mock": MockAdapter,
}

ASYNC_ADAPTERS: Dict[str, type] = {
    "httpx": AsyncHttpxAdapter,
    "mock": AsyncMockAdapter,
}


def get_adapter(handle: Any, asynchronous: bool = False) -> Union[BaseAdapter, AsyncBaseAdapter]:
    """
    Resolve an adapter handle from configuration.

    Args:
        handle: Registered name, dotted import path, adapter class, factory or
            instance. Any object exposing a callable ``request`` is accepted.
        asynchronous: Look up names in the asyncio registry

    Returns:
        Adapter instance

    Raises:
        AdapterError: If the handle cannot be resolved
    """
    registry = ASYNC_ADAPTERS if asynchronous else ADAPTERS
    target = handle

    if isinstance(target, str):
        if target in registry:
            target = registry[target]
        else:
            try:
                target = import_string(target)
            except ImportError as e:
                raise AdapterError(f"Unknown adapter '{handle}': {e}") from e

    if isinstance(target, type) or (callable(target) and not hasattr(target, "request")):
        try:
            target = target()
        except Exception as e:
            raise AdapterError(f"Failed to instantiate adapter {handle!r}: {e}") from e

    if not callable(getattr(target, "request", None)):
        raise AdapterError(f"Adapter {handle!r} does not provide a request() method")
    return target


__all__ = [
    "ADAPTERS",
    "ASYNC_ADAPTERS",
    "AdapterResult",
    "AsyncBaseAdapter",
    "AsyncHttpxAdapter",
    "AsyncMockAdapter",
    "BaseAdapter",
    "HttpxAdapter",
    "MockAdapter",
    "RawResponse",
    "Request",
    "RequestsAdapter",
    "TransportFailure",
    "get_adapter",
    "normalize_headers",
]
