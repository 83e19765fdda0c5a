"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

VCUtils HTTP client - public API surface.

Quick start::

    from vcutils.http_client import HTTPClient
    outcome = HTTPClient().get("https://api.example.com/items")

Custom client::

    class ExampleClient(HTTPClient):
        def auth_headers(self):
            return [("Authorization", "Bearer ...")]
"""

from vcutils.http_client.adapters import (
    AsyncBaseAdapter,
    AsyncHttpxAdapter,
    AsyncMockAdapter,
    BaseAdapter,
    HttpxAdapter,
    MockAdapter,
    RawResponse,
    Request,
    RequestsAdapter,
    TransportFailure,
    get_adapter,
)
from vcutils.http_client.async_client import AsyncHTTPClient
from vcutils.http_client.client import HTTPClient
from vcutils.http_client.normalizer import normalize, process_response
from vcutils.http_client.outcome import Failure, FailureKind, Outcome, Success
from vcutils.http_client.serializers import (
    AttrDict,
    DecodeResult,
    JSONSerializer,
    Serializer,
    get_serializer,
)
from vcutils.http_client.settings import ClientSettings, resolve_settings
from vcutils.http_client.telemetry import (
    CallableListener,
    TelemetryDispatcher,
    TelemetryEvent,
    TelemetryListener,
    get_listener,
)

__all__ = [
    # clients
    "HTTPClient",
    "AsyncHTTPClient",
    "ClientSettings",
    "resolve_settings",
    # outcomes
    "Outcome",
    "Success",
    "Failure",
    "FailureKind",
    "normalize",
    "process_response",
    # adapters
    "BaseAdapter",
    "AsyncBaseAdapter",
    "HttpxAdapter",
    "AsyncHttpxAdapter",
    "RequestsAdapter",
    "MockAdapter",
    "AsyncMockAdapter",
    "Request",
    "RawResponse",
    "TransportFailure",
    "get_adapter",
    # serializers
    "Serializer",
    "JSONSerializer",
    "AttrDict",
    "DecodeResult",
    "get_serializer",
    # telemetry
    "TelemetryEvent",
    "TelemetryListener",
    "TelemetryDispatcher",
    "CallableListener",
    "get_listener",
]
