"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Transport Adapter base classes and data structures.

An adapter performs the network exchange and reports what happened as a
value: a ``RawResponse`` when the server answered (whatever the status),
or a ``TransportFailure`` when no response was produced. Adapters never
interpret status codes or decode bodies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

Headers = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class Request:
    """Outbound request, built fresh for every call."""
    method: str
    url: str
    body: Optional[Union[bytes, str]] = None
    headers: Headers = ()
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class RawResponse:
    """Response as produced by the transport, body still encoded."""
    status: int
    body: Union[bytes, str] = b""
    headers: Headers = ()


@dataclass
class TransportFailure:
    """The adapter could not complete the exchange.

    Attributes:
        reason: Short machine-readable cause (``"timeout"``,
            ``"connect_error"``...) or None when unknown.
        exception: Underlying transport exception, if any.
    """
    reason: Any = None
    exception: Optional[BaseException] = None


AdapterResult = Union[RawResponse, TransportFailure]


def normalize_headers(headers: Any) -> Headers:
    """Coerce ``None``, a mapping or a sequence of pairs into a tuple of pairs."""
    if not headers:
        return ()
    if isinstance(headers, Mapping):
        items: Sequence = list(headers.items())
    else:
        items = headers
    return tuple((str(name), str(value)) for name, value in items)


class BaseAdapter(ABC):
    """Abstract base for all synchronous transport adapters."""

    @abstractmethod
    def request(
        self,
        method: str,
        url: str,
        body: Optional[Union[bytes, str]] = None,
        headers: Headers = (),
        options: Optional[Mapping[str, Any]] = None,
    ) -> AdapterResult:
        """Perform the exchange and return the raw response or a transport failure."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release adapter resources."""
        ...

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the adapter is in a usable state."""
        ...

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class AsyncBaseAdapter(ABC):
    """Abstract base for all asyncio transport adapters."""

    @abstractmethod
    async def request(
        self,
        method: str,
        url: str,
        body: Optional[Union[bytes, str]] = None,
        headers: Headers = (),
        options: Optional[Mapping[str, Any]] = None,
    ) -> AdapterResult:
        """Perform the exchange and return the raw response or a transport failure."""
        ...

    @abstractmethod
    async def aclose(self) -> None:
        """Release adapter resources."""
        ...

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the adapter is in a usable state."""
        ...

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False
