"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Shared state for VCUtils CLI commands.

The root group loads configuration once into a ``CLIContext``; subcommands
build their clients and settings from it instead of re-reading the file.
"""

from typing import Any, Optional

import click

from vcutils.config.settings import VCUtilsConfig
from vcutils.http_client.client import HTTPClient
from vcutils.http_client.settings import ClientSettings, resolve_settings


class CLIContext:
    """Configuration and options shared by every command invocation."""

    def __init__(self):
        self.config: Optional[VCUtilsConfig] = None
        self.config_path: Optional[str] = None
        self.log_level: Optional[str] = None
        self.verbose = False

    @property
    def source(self) -> str:
        """Where the configuration came from, for display."""
        return self.config_path or "defaults"

    def settings_for(self, target: Optional[str] = None, **overrides: Any) -> ClientSettings:
        """Resolve client settings for ``target`` against the loaded config."""
        return resolve_settings(target, config=self.config, overrides=overrides)

    def client(self, name: str, **overrides: Any) -> HTTPClient:
        """Build a synchronous client named ``name`` from the loaded config."""
        return HTTPClient(name=name, config=self.config, **overrides)


pass_context = click.make_pass_decorator(CLIContext, ensure=True)
