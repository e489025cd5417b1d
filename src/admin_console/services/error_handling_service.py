"""Uncaught exception capture.

``install`` replaces ``sys.excepthook`` so an exception escaping a Qt slot is
logged, kept in a short history and announced on the event bus instead of
silently killing the event loop. ``uninstall`` restores the previous hook.
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Deque, List, Optional

from .event_bus import ConsoleEvent, EventBus

__all__ = ["ErrorRecord", "ErrorHandlingService"]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorRecord:
    exc_type: type
    exc_value: BaseException
    traceback_str: str
    iso_time: str


class ErrorHandlingService:
    def __init__(self, capacity: int = 20, *, bus: EventBus | None = None) -> None:
        self._errors: Deque[ErrorRecord] = deque(maxlen=capacity)
        self._bus = bus
        self._previous_hook: Optional[Callable[..., Any]] = None

    @property
    def installed(self) -> bool:
        return self._previous_hook is not None

    def install(self) -> None:
        if self.installed:
            return
        self._previous_hook = sys.excepthook
        sys.excepthook = self._hook

    def uninstall(self) -> None:
        if self._previous_hook is None:
            return
        sys.excepthook = self._previous_hook
        self._previous_hook = None

    def _hook(self, exc_type, exc_value, tb) -> None:  # pragma: no cover - exercised via handle_exception
        self.handle_exception(exc_type, exc_value, tb)

    def handle_exception(self, exc_type, exc_value, tb) -> ErrorRecord:
        record = ErrorRecord(
            exc_type=exc_type,
            exc_value=exc_value,
            traceback_str="".join(traceback.format_exception(exc_type, exc_value, tb)),
            iso_time=datetime.now(timezone.utc).isoformat(),
        )
        self._errors.append(record)
        _logger.error(
            "Uncaught exception %s: %s", exc_type.__name__, exc_value, exc_info=(exc_type, exc_value, tb)
        )
        if self._bus is not None:
            self._bus.publish(
                ConsoleEvent.UNCAUGHT_EXCEPTION,
                {"type": exc_type.__name__, "message": str(exc_value), "iso_time": record.iso_time},
            )
        return record

    def recent_errors(self) -> List[ErrorRecord]:
        return list(self._errors)

    def clear(self) -> None:
        self._errors.clear()
