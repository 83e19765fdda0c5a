"""
Configuration management for VCUtils.

Handles loading and validation of configuration files.
"""

from vcutils.config.settings import (
    BUILTIN_CLIENT_DEFAULTS,
    CLIENT_SETTING_KEYS,
    HTTPClientConfig,
    LoggingConfig,
    VCUtilsConfig,
    get_config,
    get_default_config,
    get_default_config_path,
    load_config,
    normalize_log_level,
    set_config,
)

__all__ = [
    "BUILTIN_CLIENT_DEFAULTS",
    "CLIENT_SETTING_KEYS",
    "HTTPClientConfig",
    "LoggingConfig",
    "VCUtilsConfig",
    "get_config",
    "get_default_config",
    "get_default_config_path",
    "load_config",
    "normalize_log_level",
    "set_config",
]
