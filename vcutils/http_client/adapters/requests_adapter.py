"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

HTTP transport adapter over a pooled ``requests.Session``.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

import requests
from requests.adapters import HTTPAdapter

from vcutils.http_client.adapters.base import (
    AdapterResult,
    BaseAdapter,
    Headers,
    RawResponse,
    TransportFailure,
)
from vcutils.logging_config import get_logger

logger = get_logger(__name__)

FORWARDED_OPTIONS = ("params", "timeout", "cookies", "auth", "verify", "proxies", "cert")


class RequestsAdapter(BaseAdapter):
    """
    Alternative HTTP transport for codebases already standardised on requests.

    Connections are pooled by a mounted ``HTTPAdapter``. Retries are
    disabled: failures are reported once and never retried.

    Args:
        timeout: Default request timeout in seconds
        pool_connections: Number of host pools to cache
        pool_maxsize: Maximum connections kept per host pool
        session: Optional pre-configured session to use instead of a new one
    """

    def __init__(
        self,
        timeout: float = 30.0,
        pool_connections: int = 10,
        pool_maxsize: int = 20,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            http_adapter = HTTPAdapter(
                max_retries=0,
                pool_connections=pool_connections,
                pool_maxsize=pool_maxsize,
            )
            session.mount("http://", http_adapter)
            session.mount("https://", http_adapter)
        self.session = session
        self._connected = True

    def _request_kwargs(
        self,
        body: Optional[Union[bytes, str]],
        headers: Headers,
        options: Optional[Mapping[str, Any]],
    ) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"headers": dict(headers), "timeout": self.timeout}
        if body is not None:
            kwargs["data"] = body
        for key, value in (options or {}).items():
            if key == "follow_redirects":
                kwargs["allow_redirects"] = value
            elif key in FORWARDED_OPTIONS:
                kwargs[key] = value
            else:
                logger.debug("requests_option_ignored", option=key)
        return kwargs

    def request(
        self,
        method: str,
        url: str,
        body: Optional[Union[bytes, str]] = None,
        headers: Headers = (),
        options: Optional[Mapping[str, Any]] = None,
    ) -> AdapterResult:
        try:
            response = self.session.request(
                method, url, **self._request_kwargs(body, headers, options)
            )
        except requests.exceptions.Timeout as e:
            logger.debug("requests_transport_error", method=method, url=url, error=str(e))
            return TransportFailure(reason="timeout", exception=e)
        except requests.exceptions.ConnectionError as e:
            logger.debug("requests_transport_error", method=method, url=url, error=str(e))
            return TransportFailure(reason="connect_error", exception=e)
        except requests.exceptions.RequestException as e:
            logger.debug("requests_transport_error", method=method, url=url, error=str(e))
            return TransportFailure(reason=str(e) or type(e).__name__, exception=e)

        return RawResponse(
            status=response.status_code,
            body=response.content,
            headers=tuple(response.headers.items()),
        )

    def close(self) -> None:
        self.session.close()
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected
