"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Request telemetry.

After every request the HTTP client hands a ``TelemetryEvent`` to its
configured listener. Delivery runs on a background worker pool: the caller
never waits for it, and a listener that raises, hangs or is unreachable has
no effect on the returned outcome. Events are delivered best-effort and in
no particular order.
"""

from __future__ import annotations

import atexit
import threading
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from vcutils.exceptions import TelemetryListenerError
from vcutils.http_client.outcome import Outcome
from vcutils.logging_config import get_logger
from vcutils.utils import import_string

logger = get_logger(__name__)


@dataclass(frozen=True)
class TelemetryEvent:
    """Timing and full call context of one request."""
    elapsed_ms: float
    outcome: Outcome
    method: str
    url: str
    body: Any = None
    headers: Tuple[Tuple[str, str], ...] = ()
    options: Mapping[str, Any] = field(default_factory=dict)
    client: Optional[str] = None


class TelemetryListener(ABC):
    """Observer notified of each request."""

    @abstractmethod
    def handle_event(self, event: TelemetryEvent) -> None:
        """Receive one event. Runs on a background thread."""
        ...


class CallableListener(TelemetryListener):
    """Adapts a plain function to the listener interface."""

    def __init__(self, func: Callable[[TelemetryEvent], Any]):
        self.func = func

    def handle_event(self, event: TelemetryEvent) -> None:
        self.func(event)

    def __repr__(self) -> str:
        return f"CallableListener({self.func!r})"


ListenerHandle = Union[None, str, TelemetryListener, Callable[[TelemetryEvent], Any]]


def get_listener(handle: ListenerHandle) -> Optional[TelemetryListener]:
    """
    Resolve a telemetry listener handle from configuration.

    Args:
        handle: None, dotted import path, listener class or instance, or a
            callable taking a ``TelemetryEvent``

    Returns:
        Listener instance, or None when telemetry is disabled

    Raises:
        TelemetryListenerError: If the handle cannot be resolved
    """
    if handle is None or handle == "":
        return None

    target: Any = handle
    if isinstance(target, str):
        try:
            target = import_string(target)
        except ImportError as e:
            raise TelemetryListenerError(f"Unknown telemetry listener '{handle}': {e}") from e

    if isinstance(target, type) and issubclass(target, TelemetryListener):
        try:
            target = target()
        except Exception as e:
            raise TelemetryListenerError(f"Failed to instantiate listener {handle!r}: {e}") from e

    if isinstance(target, TelemetryListener):
        return target
    if callable(getattr(target, "handle_event", None)):
        return CallableListener(target.handle_event)
    if callable(target):
        return CallableListener(target)
    raise TelemetryListenerError(f"Telemetry listener {handle!r} is not callable")


class TelemetryDispatcher:
    """
    Fire-and-forget delivery of telemetry events.

    At most ``max_pending`` events are queued or in flight at once. Further
    events are dropped with a warning until a worker frees a slot, so a hung
    listener cannot grow the backlog without bound.

    Args:
        max_workers: Size of the background worker pool
        max_pending: Cap on events queued or being delivered
    """

    def __init__(self, max_workers: int = 4, max_pending: int = 1000):
        self._max_workers = max_workers
        self._max_pending = max_pending
        self._slots = threading.BoundedSemaphore(max_pending)
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()

    def _ensure_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            with self._lock:
                if self._executor is None:
                    self._executor = ThreadPoolExecutor(
                        max_workers=self._max_workers,
                        thread_name_prefix="vcutils-telemetry",
                    )
        return self._executor

    def dispatch(
        self, listener: Optional[TelemetryListener], event: TelemetryEvent
    ) -> Optional[Future]:
        """
        Schedule delivery of ``event`` to ``listener`` and return immediately.

        Returns:
            Future tracking the delivery (useful in tests), or None when there
            is no listener, the backlog is full or the interpreter is
            shutting down
        """
        if listener is None:
            return None
        if not self._slots.acquire(blocking=False):
            logger.warning(
                "telemetry_event_dropped",
                max_pending=self._max_pending,
                method=event.method,
                url=event.url,
            )
            return None
        try:
            future = self._ensure_executor().submit(_deliver, listener, event)
        except RuntimeError as e:
            self._slots.release()
            # Executor already shut down at interpreter exit
            logger.warning("telemetry_dispatch_skipped", error=str(e), url=event.url)
            return None
        future.add_done_callback(self._release_slot)
        return future

    def _release_slot(self, future: Future) -> None:
        self._slots.release()

    def shutdown(self, wait: bool = True) -> None:
        """Stop the worker pool; a later dispatch starts a fresh one."""
        with self._lock:
            if self._executor is not None:
                self._executor.shutdown(wait=wait)
                self._executor = None


def _deliver(listener: TelemetryListener, event: TelemetryEvent) -> None:
    try:
        listener.handle_event(event)
    except Exception as e:
        logger.warning(
            "telemetry_listener_failed",
            listener=repr(listener),
            method=event.method,
            url=event.url,
            error=str(e),
            exc_info=True,
        )


_default_dispatcher = TelemetryDispatcher()
atexit.register(_default_dispatcher.shutdown, False)


def get_dispatcher() -> TelemetryDispatcher:
    """Return the process-wide dispatcher shared by all clients."""
    return _default_dispatcher
