"""Logging setup and in-process log capture.

``configure_logging`` installs the console handler used by the launcher.
``LoggingService`` keeps the most recent records in a ring buffer so a
diagnostics panel (or a test) can inspect them, and announces each record on
the event bus as ``log.record_added`` when a bus is registered.
"""

from __future__ import annotations

import json
import logging
from collections import deque
from dataclasses import asdict, dataclass
from pathlib import Path
from threading import RLock
from typing import Deque, List, Optional

from .event_bus import ConsoleEvent, EventBus
from .service_locator import services

__all__ = [
    "LOG_FORMAT",
    "LogEntry",
    "LoggingService",
    "configure_logging",
]

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Handler:
    """Attach a stream handler to the root logger (idempotent)."""
    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)
    for handler in root.handlers:
        if getattr(handler, "_admin_console_console", False):
            return handler
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._admin_console_console = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    return handler


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str
    created: float
    pathname: str
    lineno: int


class _RingBufferHandler(logging.Handler):
    def __init__(self, svc: "LoggingService") -> None:
        super().__init__()
        self._svc = svc

    def emit(self, record: logging.LogRecord) -> None:
        self._svc._ingest_record(record)


class LoggingService:
    def __init__(self, capacity: int = 500, *, bus: EventBus | None = None) -> None:
        self._lock = RLock()
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._handler = _RingBufferHandler(self)
        self._handler.setLevel(logging.DEBUG)
        self._bus = bus
        self._attached = False

    def attach_root(self) -> None:
        if self._attached:
            return
        logging.getLogger().addHandler(self._handler)
        self._attached = True

    def detach_root(self) -> None:
        if not self._attached:
            return
        logging.getLogger().removeHandler(self._handler)
        self._attached = False

    def _ingest_record(self, record: logging.LogRecord) -> None:
        entry = LogEntry(
            level=record.levelname,
            name=record.name,
            message=record.getMessage(),
            created=record.created,
            pathname=record.pathname,
            lineno=record.lineno,
        )
        with self._lock:
            self._entries.append(entry)
        bus = self._bus or services.try_get("event_bus")
        # Bus handler failures are logged by the bus itself; skip them here to
        # avoid feeding the ring buffer from its own announcements.
        if isinstance(bus, EventBus) and record.name != "admin_console.services.event_bus":
            bus.publish(
                ConsoleEvent.LOG_RECORD_ADDED,
                {"level": entry.level, "name": entry.name, "message": entry.message[:120]},
            )

    def recent(self, limit: Optional[int] = None) -> List[LogEntry]:
        with self._lock:
            data = list(self._entries)
        return data[-limit:] if limit is not None else data

    def filter(self, *, level: str | None = None, name_contains: str | None = None) -> List[LogEntry]:
        return [
            e
            for e in self.recent()
            if (not level or e.level == level) and (not name_contains or name_contains in e.name)
        ]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def export_jsonl(
        self, path: str | Path, *, level: str | None = None, name_contains: str | None = None
    ) -> int:
        """Write filtered entries as JSON Lines; returns the number written."""
        entries = self.filter(level=level, name_contains=name_contains)
        with open(path, "w", encoding="utf-8") as f:
            for e in entries:
                f.write(json.dumps(asdict(e), sort_keys=True) + "\n")
        return len(entries)
