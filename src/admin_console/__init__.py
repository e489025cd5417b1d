"""Admin console public API.

Curated, intentionally small surface for callers (launcher, tests, other
screens) that need the generic table pipeline or the shared infrastructure
without reaching into deep module paths. Importing this package does not
import PyQt6.
"""

from __future__ import annotations

from .models import (  # noqa: F401
    ColumnDescriptor,
    SortDirection,
    TableSnapshot,
    TableState,
)
from .services.event_bus import ConsoleEvent, Event, EventBus  # noqa: F401
from .services.service_locator import (  # noqa: F401
    ServiceAlreadyRegisteredError,
    ServiceLocator,
    ServiceNotFoundError,
    services,
)
from .viewmodels.table_viewmodel import TableViewModel  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "ColumnDescriptor",
    "SortDirection",
    "TableSnapshot",
    "TableState",
    "TableViewModel",
    "ConsoleEvent",
    "Event",
    "EventBus",
    "services",
    "ServiceLocator",
    "ServiceAlreadyRegisteredError",
    "ServiceNotFoundError",
]
