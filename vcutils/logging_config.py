"""
Logging configuration for VCUtils.

Provides centralized structured logging setup with JSON output for production
and human-readable output for development. Supports correlation IDs for
request tracing across components.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict


# Context variable for correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

# Levels accepted by the request log helpers
REQUEST_LOG_LEVELS = ("debug", "info", "warning", "error")


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if present in context.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary to modify

    Returns:
        Modified event dictionary with correlation_id if available
    """
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for the current context.

    Args:
        correlation_id: Optional correlation ID. If None, generates a new UUID.

    Returns:
        The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear correlation ID from current context."""
    correlation_id_var.set(None)


def get_correlation_id() -> Optional[str]:
    """
    Get the current correlation ID from context.

    Returns:
        Current correlation ID or None if not set
    """
    return correlation_id_var.get()


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for VCUtils.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(file_handler)
    else:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(numeric_level)
        stderr_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(stderr_handler)

    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(default=repr))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Structured logger instance.
    """
    if name.startswith("vcutils."):
        return structlog.get_logger(name)
    return structlog.get_logger(f"vcutils.{name}")


def format_duration(seconds: float) -> str:
    """
    Render a duration in human-readable form.

    Examples:
        0.0004 -> "400 microseconds"
        1.25 -> "1 second, 250 milliseconds"
        125.0 -> "2 minutes, 5 seconds"
    """
    total_us = int(round(seconds * 1_000_000))
    if total_us <= 0:
        return "0 microseconds"

    units = [
        ("hour", 3_600_000_000),
        ("minute", 60_000_000),
        ("second", 1_000_000),
        ("millisecond", 1_000),
        ("microsecond", 1),
    ]
    # Drop sub-unit noise for longer calls
    if total_us >= 60_000_000:
        units = units[:3]
    elif total_us >= 1_000_000:
        units = units[:4]

    parts = []
    remainder = total_us
    for unit_name, unit_us in units:
        count, remainder = divmod(remainder, unit_us)
        if count:
            parts.append(f"{count} {unit_name}{'' if count == 1 else 's'}")
    return ", ".join(parts) or f"0 {units[-1][0]}s"


# Convenience functions for the HTTP client request trail

def log_http_request(
    logger: structlog.stdlib.BoundLogger,
    level: str,
    client: str,
    method: str,
    url: str,
    headers: Any,
    body: Any,
    options: Any,
    outcome: Any,
    **kwargs: Any,
) -> None:
    """
    Log a completed HTTP request together with its outcome.

    Args:
        logger: Logger instance
        level: One of "debug", "info", "warning", "error"
        client: Name of the client that issued the request
        method: HTTP method
        url: Request URL
        headers: Request headers as sent
        body: Encoded request body
        options: Adapter options
        outcome: Normalized outcome of the call
        **kwargs: Additional context to log
    """
    if level not in REQUEST_LOG_LEVELS:
        return

    log_data: Dict[str, Any] = {
        "event_type": "http_request",
        "client": client,
        "method": method,
        "url": url,
        "headers": headers,
        "body": body,
        "options": options,
        "outcome": outcome,
    }

    log_data.update(kwargs)

    getattr(logger, level)("http_request", **log_data)


def log_http_timing(
    logger: structlog.stdlib.BoundLogger,
    level: str,
    client: str,
    method: str,
    url: str,
    elapsed_seconds: float,
    **kwargs: Any,
) -> None:
    """
    Log how long an HTTP call took.

    Args:
        logger: Logger instance
        level: One of "debug", "info", "warning", "error"
        client: Name of the client that issued the request
        method: HTTP method
        url: Request URL
        elapsed_seconds: Wall-clock duration of the call
        **kwargs: Additional context to log
    """
    if level not in REQUEST_LOG_LEVELS:
        return

    log_data: Dict[str, Any] = {
        "event_type": "http_request_timing",
        "client": client,
        "method": method,
        "url": url,
        "elapsed_ms": round(elapsed_seconds * 1000, 3),
        "elapsed": format_duration(elapsed_seconds),
    }

    log_data.update(kwargs)

    getattr(logger, level)("http_request_timing", **log_data)
