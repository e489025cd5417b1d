"""Synchronous publish/subscribe bus for the console.

Producers (table view models, the record store, logging) publish named
events; screens and diagnostics subscribe without importing each other.

Handlers run in subscription order on the publishing thread. A failing
handler is recorded and logged, and the remaining handlers still run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "ConsoleEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]

_logger = logging.getLogger(__name__)


class ConsoleEvent(str, Enum):
    STARTUP_COMPLETE = "app.startup_complete"
    UNCAUGHT_EXCEPTION = "app.uncaught_exception"
    SCREEN_CHANGED = "app.screen_changed"
    LOG_RECORD_ADDED = "log.record_added"
    RECORD_CREATED = "records.created"
    TABLE_SEARCH_CHANGED = "table.search_changed"
    TABLE_SORT_REQUESTED = "table.sort_requested"
    TABLE_PAGE_CHANGED = "table.page_changed"
    TABLE_PAGE_SIZE_CHANGED = "table.page_size_changed"


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: str | ConsoleEvent) -> str:
    return name.value if isinstance(name, ConsoleEvent) else name


class EventBus:
    """Synchronous event dispatcher.

    The subscriber table is guarded by a re-entrant lock; handlers are invoked
    with the lock released so they may subscribe or unsubscribe while a
    publish is in progress.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []

    # Subscription management -----------------------------------------
    def subscribe(
        self, name: str | ConsoleEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        sub = Subscription(event=_key(name), handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket:
                self._subs[sub.event] = [s for s in bucket if s is not sub]
                if not self._subs[sub.event]:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # Publishing --------------------------------------------------------
    def publish(self, name: str | ConsoleEvent, payload: Any = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        finished_once: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                with self._lock:
                    self._errors.append((evt, exc))
                _logger.error("Handler for %s failed: %s", key, exc, exc_info=exc)
            else:
                if sub.once:
                    finished_once.append(sub)
        for sub in finished_once:
            self.unsubscribe(sub)
        return evt

    # Introspection -----------------------------------------------------
    def subscriber_count(self, name: str | ConsoleEvent) -> int:
        with self._lock:
            return len(self._subs.get(_key(name), ()))

    def list_events(self) -> list[str]:
        with self._lock:
            return list(self._subs.keys())

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)
