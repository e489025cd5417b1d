"""Service layer exports.

Responsibilities:
 - Table pipeline stages (filter, sort, paginate)
 - Record store holding the process-local collections
 - Service locator and EventBus publish/subscribe core
"""

from .service_locator import services, ServiceLocator  # noqa: F401
from .event_bus import EventBus, ConsoleEvent  # noqa: F401

__all__ = [
    "services",
    "ServiceLocator",
    "EventBus",
    "ConsoleEvent",
]
