"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Request outcomes.

Every call through the HTTP client returns exactly one of two values:

- ``Success(status, body)`` for a 2xx response whose body decoded (or was
  empty).
- ``Failure(status, body, message, error)`` for everything else. ``status``
  is None only when the transport failed before any response existed.

Callers branch on ``outcome.ok`` (or ``isinstance``/``match``) and may call
``unwrap()`` to turn a ``Failure`` back into an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from vcutils.exceptions import (
    DecodeError,
    EncodeError,
    HTTPClientError,
    HTTPError,
    TransportError,
)


class FailureKind(Enum):
    """Why a request failed."""
    TRANSPORT = "transport"  # no HTTP response was produced
    DECODE = "decode"  # body present but the serializer rejected it
    HTTP = "http"  # non-2xx status
    ENCODE = "encode"  # request body could not be encoded, nothing was sent


@dataclass(frozen=True)
class Success:
    """2xx response with its decoded body."""
    status: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Return the decoded body."""
        return self.body


@dataclass(frozen=True)
class Failure:
    """
    Any non-success result.

    Attributes:
        status: HTTP status, or None for transport failures
        body: Decoded error body, the raw body when decoding failed, or a
            ``{"error": ...}`` mapping for unstructured transport errors
        message: Human-readable diagnostic, when one was produced
        error: Exception describing the failure; excluded from equality
    """
    status: Optional[int] = None
    body: Any = None
    message: Optional[str] = None
    error: Optional[HTTPClientError] = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> FailureKind:
        if isinstance(self.error, EncodeError):
            return FailureKind.ENCODE
        if isinstance(self.error, TransportError):
            return FailureKind.TRANSPORT
        if isinstance(self.error, DecodeError):
            return FailureKind.DECODE
        if isinstance(self.error, HTTPError):
            return FailureKind.HTTP
        return FailureKind.TRANSPORT if self.status is None else FailureKind.HTTP

    def unwrap(self) -> Any:
        """Raise the exception describing this failure."""
        if self.error is not None:
            raise self.error
        exc_type = TransportError if self.status is None else HTTPError
        raise exc_type(
            self.message or f"Request failed with status {self.status}",
            status=self.status,
            body=self.body,
        )


Outcome = Union[Success, Failure]
