"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Request/response body serializers.

A serializer encodes outbound structured bodies and decodes inbound ones.
The normalizer only ever calls ``try_decode``, which reports malformed input
as a ``DecodeResult`` value instead of raising.
"""

from __future__ import annotations

import inspect
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type, Union

from vcutils.exceptions import SerializerError
from vcutils.utils import import_string


class AttrDict(dict):
    """``dict`` whose keys can also be read as attributes.

    Used for ``keys="atoms"`` decoding so ``post.title`` and
    ``post["title"]`` both work. Compares equal to a plain dict.
    """

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None


@dataclass(frozen=True)
class DecodeResult:
    """Tagged result of a decode attempt."""
    ok: bool
    value: Any = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, value: Any) -> "DecodeResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: Exception) -> "DecodeResult":
        return cls(ok=False, error=error)


class Serializer(ABC):
    """Abstract base for body codecs."""

    name: str = "serializer"
    content_type: str = "application/octet-stream"

    # Exceptions that mean "malformed input" for this codec
    decode_errors: Tuple[Type[Exception], ...] = (ValueError, TypeError)

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        """Encode a structured value to bytes."""
        ...

    @abstractmethod
    def decode(self, data: Union[bytes, str], keys: str = "atoms") -> Any:
        """Decode bytes to a structured value, raising on malformed input."""
        ...

    def try_decode(self, data: Union[bytes, str], keys: str = "atoms") -> DecodeResult:
        """Decode without raising for malformed input."""
        try:
            return DecodeResult.success(self.decode(data, keys=keys))
        except self.decode_errors as e:
            return DecodeResult.failure(e)


class JSONSerializer(Serializer):
    """
    JSON codec built on the standard library ``json`` module.

    Args:
        ensure_ascii: Escape non-ASCII characters when encoding
        separators: Item/key separators passed to ``json.dumps``
    """

    name = "json"
    content_type = "application/json"
    # ValueError also covers oversized integer literals; deep nesting raises RecursionError
    decode_errors = (ValueError, TypeError, RecursionError)

    def __init__(self, ensure_ascii: bool = False, separators: Tuple[str, str] = (",", ":")):
        self.ensure_ascii = ensure_ascii
        self.separators = separators

    def encode(self, value: Any) -> bytes:
        return json.dumps(
            value,
            ensure_ascii=self.ensure_ascii,
            separators=self.separators,
            default=str,
        ).encode("utf-8")

    def decode(self, data: Union[bytes, str], keys: str = "atoms") -> Any:
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        if keys == "atoms":
            return json.loads(data, object_hook=AttrDict)
        return json.loads(data)

    def __repr__(self) -> str:
        return "JSONSerializer()"


SERIALIZERS: Dict[str, Type[Serializer]] = {
    "json": JSONSerializer,
}


def get_serializer(handle: Any = "json") -> Serializer:
    """
    Resolve a serializer handle from configuration.

    Args:
        handle: Registered name, dotted import path, class or instance

    Returns:
        Serializer instance

    Raises:
        SerializerError: If the handle cannot be resolved
    """
    target = handle if handle is not None else "json"

    if isinstance(target, str):
        if target.lower() in SERIALIZERS:
            target = SERIALIZERS[target.lower()]
        else:
            try:
                target = import_string(target)
            except ImportError as e:
                raise SerializerError(f"Unknown serializer '{handle}': {e}") from e

    if isinstance(target, type):
        try:
            target = target()
        except Exception as e:
            raise SerializerError(f"Failed to instantiate serializer {handle!r}: {e}") from e

    if not callable(getattr(target, "encode", None)):
        raise SerializerError(f"Serializer {handle!r} does not provide encode()")
    if not callable(getattr(target, "try_decode", None)):
        if not callable(getattr(target, "decode", None)):
            raise SerializerError(f"Serializer {handle!r} does not provide decode()")
        target = _ForeignSerializer(target)
    return target


class _ForeignSerializer(Serializer):
    """Wraps a codec that only offers ``encode``/``decode``."""

    # Foreign codecs raise their own error types
    decode_errors = (Exception,)

    def __init__(self, codec: Any):
        self.codec = codec
        self.name = getattr(codec, "name", type(codec).__name__)
        try:
            params = inspect.signature(codec.decode).parameters
        except (TypeError, ValueError):
            params = {}
        self._accepts_keys = "keys" in params or any(
            p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values()
        )

    def encode(self, value: Any) -> bytes:
        return self.codec.encode(value)

    def decode(self, data: Union[bytes, str], keys: str = "atoms") -> Any:
        if self._accepts_keys:
            return self.codec.decode(data, keys=keys)
        return self.codec.decode(data)

    def __repr__(self) -> str:
        return f"_ForeignSerializer({self.codec!r})"
