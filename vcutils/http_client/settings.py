"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Resolved per-client settings.

Configuration names adapters, serializers and listeners symbolically. They
are resolved once, when a client is built, into a frozen ``ClientSettings``
that the request path reads without further lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from vcutils.config.settings import (
    CLIENT_SETTING_KEYS,
    VALID_KEY_MODES,
    VCUtilsConfig,
    get_config,
    normalize_log_level,
)
from vcutils.exceptions import InvalidConfigurationError
from vcutils.http_client.adapters import get_adapter
from vcutils.http_client.serializers import Serializer, get_serializer
from vcutils.http_client.telemetry import TelemetryListener, get_listener


@dataclass(frozen=True)
class ClientSettings:
    """Capability handles and options used for every request of one client."""
    adapter: Any
    serializer: Serializer
    log_level: str = "debug"
    telemetry_listener: Optional[TelemetryListener] = None
    keys: str = "atoms"

    @property
    def logging_enabled(self) -> bool:
        return self.log_level != "none"

    def describe(self) -> Dict[str, Any]:
        """Plain-data view of the settings, for logs and the CLI."""
        return {
            "adapter": type(self.adapter).__name__,
            "serializer": getattr(self.serializer, "name", type(self.serializer).__name__),
            "log_level": self.log_level,
            "telemetry_listener": repr(self.telemetry_listener) if self.telemetry_listener else None,
            "keys": self.keys,
        }


def resolve_settings(
    target: Optional[str] = None,
    config: Optional[VCUtilsConfig] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    asynchronous: bool = False,
) -> ClientSettings:
    """
    Merge configuration layers for ``target`` and resolve every handle.

    Layers, lowest precedence first: built-in defaults, ``http_client.defaults``,
    ``http_client.targets[target]``, then ``overrides``.

    Args:
        target: Client name used to look up per-target overrides
        config: Configuration to read; the process-wide one when None
        overrides: Explicit settings, typically constructor keyword arguments
        asynchronous: Resolve adapter names against the asyncio registry

    Raises:
        InvalidConfigurationError: For unknown keys or invalid values
        AdapterError, SerializerError, TelemetryListenerError: For handles
            that cannot be resolved
    """
    if config is None:
        config = get_config()

    merged = config.settings_for(target)
    if overrides:
        unknown = sorted(set(overrides) - set(CLIENT_SETTING_KEYS))
        if unknown:
            raise InvalidConfigurationError(
                f"Unknown client settings {unknown}, expected a subset of {list(CLIENT_SETTING_KEYS)}"
            )
        merged.update(overrides)

    keys = merged["keys"]
    if keys not in VALID_KEY_MODES:
        raise InvalidConfigurationError(
            f"keys must be one of {list(VALID_KEY_MODES)}, got {keys!r}"
        )

    return ClientSettings(
        adapter=get_adapter(merged["adapter"], asynchronous=asynchronous),
        serializer=get_serializer(merged["serializer"]),
        log_level=normalize_log_level(merged["log_level"]),
        telemetry_listener=get_listener(merged["telemetry_listener"]),
        keys=keys,
    )
