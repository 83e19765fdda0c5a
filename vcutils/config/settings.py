"""
Configuration management for VCUtils.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.

HTTP client settings are layered: built-in defaults, then the process-wide
``http_client.defaults`` section, then a per-target section under
``http_client.targets`` keyed by client name::

    http_client:
      defaults:
        adapter: httpx
        serializer: json
        log_level: debug
      targets:
        myapp.clients.BillingClient:
          log_level: info
          telemetry_listener: myapp.telemetry:billing_listener
"""

import os
import re
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from vcutils.exceptions import InvalidConfigurationError
from vcutils.logging_config import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "VCUTILS_CONFIG"

# Keys recognised in http_client.defaults and http_client.targets.<name>
CLIENT_SETTING_KEYS = ("adapter", "serializer", "log_level", "telemetry_listener", "keys")

VALID_REQUEST_LOG_LEVELS = ("debug", "info", "warning", "error", "none")
VALID_KEY_MODES = ("atoms", "strings")

BUILTIN_CLIENT_DEFAULTS: Dict[str, Any] = {
    "adapter": "httpx",
    "serializer": "json",
    "log_level": "debug",
    "telemetry_listener": None,
    "keys": "atoms",
}


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${API_HOST}" -> value of API_HOST env var
        "${LOG_LEVEL:info}" -> value of LOG_LEVEL or "info" if not set
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


def normalize_log_level(value: Any) -> str:
    """
    Map a configured request log level onto one of ``VALID_REQUEST_LOG_LEVELS``.

    ``False``, ``None``, ``"none"`` and ``"false"`` disable request logging.
    ``True`` and ``"true"`` mean ``"debug"``.

    Raises:
        InvalidConfigurationError: If the value is not recognised
    """
    if value is None or value is False:
        return "none"
    if value is True:
        return "debug"
    if isinstance(value, str):
        level = value.strip().lower()
        if level == "false":
            return "none"
        if level == "true":
            return "debug"
        if level == "warn":
            return "warning"
        if level in VALID_REQUEST_LOG_LEVELS:
            return level
    raise InvalidConfigurationError(
        f"log_level must be one of {list(VALID_REQUEST_LOG_LEVELS) + ['true', 'false']}, "
        f"got {value!r}"
    )


@dataclass
class HTTPClientConfig:
    """HTTP client defaults and per-target overrides."""

    defaults: Dict[str, Any] = field(default_factory=dict)
    targets: Dict[str, Dict[str, Any]] = field(default_factory=dict)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    format: str = "console"  # "console" or "json"


@dataclass
class VCUtilsConfig:
    """Main VCUtils configuration."""

    http_client: HTTPClientConfig = field(default_factory=HTTPClientConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def settings_for(self, target: Optional[str] = None) -> Dict[str, Any]:
        """
        Merge built-in defaults, process-wide defaults and target overrides.

        Args:
            target: Client name to look up under ``http_client.targets``

        Returns:
            New dict with every key in ``CLIENT_SETTING_KEYS``
        """
        merged = dict(BUILTIN_CLIENT_DEFAULTS)
        merged.update(self.http_client.defaults)
        if target is not None:
            merged.update(self.http_client.targets.get(target, {}))
        return merged


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.environ.get(CONFIG_ENV_VAR) or os.path.expanduser("~/.vcutils/config.yaml")


def get_default_config() -> VCUtilsConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        VCUtilsConfig: Default configuration object
    """
    return VCUtilsConfig(
        http_client=HTTPClientConfig(defaults=dict(BUILTIN_CLIENT_DEFAULTS), targets={}),
        logging=LoggingConfig(level="INFO", file="", format="console"),
    )


def load_config(config_path: Optional[str] = None) -> VCUtilsConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises ConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        VCUtilsConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(str(config_path))

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    config_data = _expand_env_vars(config_data)
    logger.debug("Expanded environment variables in configuration")

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except InvalidConfigurationError as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e

    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> VCUtilsConfig:
    """
    Build configuration object from dictionary.

    Args:
        config_data: Configuration dictionary from YAML

    Returns:
        VCUtilsConfig: Configuration object

    Raises:
        InvalidConfigurationError: If a section has the wrong shape
    """
    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"configuration root must be a mapping, got {type(config_data).__name__}"
        )

    http_data = config_data.get("http_client") or {}
    if not isinstance(http_data, dict):
        raise InvalidConfigurationError("http_client section must be a mapping")

    defaults = http_data.get("defaults") or {}
    targets = http_data.get("targets") or {}
    if not isinstance(defaults, dict):
        raise InvalidConfigurationError("http_client.defaults must be a mapping")
    if not isinstance(targets, dict) or not all(
        isinstance(v, dict) for v in targets.values()
    ):
        raise InvalidConfigurationError("http_client.targets must map names to mappings")

    http_client = HTTPClientConfig(
        defaults={**BUILTIN_CLIENT_DEFAULTS, **defaults},
        targets={str(name): dict(values) for name, values in targets.items()},
    )

    logging_data = config_data.get("logging") or {}
    if not isinstance(logging_data, dict):
        raise InvalidConfigurationError("logging section must be a mapping")
    logging = LoggingConfig(
        level=str(logging_data.get("level", "INFO")),
        file=logging_data.get("file") or "",
        format=str(logging_data.get("format", "console")),
    )

    return VCUtilsConfig(http_client=http_client, logging=logging)


def _validate_client_settings(section: str, values: Dict[str, Any]) -> None:
    unknown = sorted(set(values) - set(CLIENT_SETTING_KEYS))
    if unknown:
        raise InvalidConfigurationError(
            f"{section} has unknown keys {unknown}, expected a subset of {list(CLIENT_SETTING_KEYS)}"
        )
    if "log_level" in values:
        normalize_log_level(values["log_level"])
    if "keys" in values and values["keys"] not in VALID_KEY_MODES:
        raise InvalidConfigurationError(
            f"{section}.keys must be one of {list(VALID_KEY_MODES)}, got {values['keys']!r}"
        )


def _validate_config(config: VCUtilsConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    _validate_client_settings("http_client.defaults", config.http_client.defaults)
    for name, values in config.http_client.targets.items():
        _validate_client_settings(f"http_client.targets.{name}", values)

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )

    if config.logging.format not in ("console", "json"):
        raise InvalidConfigurationError(
            f"logging format must be 'console' or 'json', got '{config.logging.format}'"
        )


# Process-wide configuration, read-only once loaded

_config_lock = threading.Lock()
_process_config: Optional[VCUtilsConfig] = None


def get_config() -> VCUtilsConfig:
    """
    Return the process-wide configuration, loading it on first use.

    Returns:
        VCUtilsConfig: Shared configuration object
    """
    global _process_config
    if _process_config is None:
        with _config_lock:
            if _process_config is None:
                _process_config = load_config()
    return _process_config


def set_config(config: Optional[VCUtilsConfig]) -> None:
    """
    Install the process-wide configuration, typically once at startup.

    Passing None drops the cached configuration so the next ``get_config()``
    reloads it from disk.
    """
    global _process_config
    with _config_lock:
        _process_config = config
