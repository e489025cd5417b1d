"""Application bootstrap for the admin console.

Responsibilities:
 - Configure logging and attach the in-process log buffer
 - Create the QApplication unless running headless
 - Load UI config and the seed record collections
 - Register shared services (event bus, record store, config, logging,
   error handling) on the global service locator

PyQt6 is imported lazily so unit tests and tooling can bootstrap headless.
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from admin_console.config import settings
from admin_console.services.error_handling_service import ErrorHandlingService
from admin_console.services.event_bus import ConsoleEvent, EventBus
from admin_console.services.logging_service import LoggingService, configure_logging
from admin_console.services.record_store import SEED_DIR, RecordStore
from admin_console.services.service_locator import ServiceLocator, services
from .config_store import AppConfig, load_config, save_config

try:  # Lazy / optional Qt import
    from PyQt6.QtWidgets import QApplication  # type: ignore

    _QT_AVAILABLE = True
except ImportError:  # pragma: no cover - exercised only without PyQt6
    QApplication = None  # type: ignore
    _QT_AVAILABLE = False

__all__ = ["AppContext", "create_app", "shutdown_app"]

_logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """References created during bootstrap.

    Attributes
    ----------
    qt_app: The QApplication instance (None when headless)
    headless: Whether the Qt application was skipped
    data_dir: Directory holding ``app_state.json``
    config: Loaded UI state
    bus: Fresh event bus for this session
    store: Record collections for the session
    services: Global service locator after registration
    duration_s: Elapsed bootstrap time in seconds
    """

    qt_app: Optional[Any]
    headless: bool
    data_dir: Path
    config: AppConfig
    bus: EventBus
    store: RecordStore
    services: ServiceLocator
    logging_service: LoggingService
    error_handler: ErrorHandlingService
    duration_s: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)


def create_app(
    *,
    headless: bool | None = None,
    data_dir: str | Path | None = None,
    seed_dir: str | Path | None = None,
    log_level: str | None = None,
    install_excepthook: bool = False,
) -> AppContext:
    started = time.perf_counter()
    configure_logging(log_level or settings.LOG_LEVEL)
    if headless is None:
        headless = not _QT_AVAILABLE

    qt_app = None
    if not headless and _QT_AVAILABLE:
        qt_app = QApplication.instance() or QApplication(sys.argv[:1])
        qt_app.setApplicationName("Admin Console")

    base = Path(data_dir or settings.DATA_DIR)
    app_config = load_config(base)
    bus = EventBus()
    log_service = LoggingService(bus=bus)
    log_service.attach_root()
    error_handler = ErrorHandlingService(bus=bus)
    if install_excepthook:
        error_handler.install()
    store = RecordStore.from_seed(seed_dir or SEED_DIR, bus=bus)

    # Each bootstrap gets fresh instances (test isolation)
    for key, value in (
        ("event_bus", bus),
        ("app_config", app_config),
        ("record_store", store),
        ("logging_service", log_service),
        ("error_handler", error_handler),
    ):
        services.register(key, value, allow_override=True)

    duration = time.perf_counter() - started
    _logger.info("Bootstrap finished in %.3fs (headless=%s)", duration, headless)
    bus.publish(ConsoleEvent.STARTUP_COMPLETE, {"duration_s": duration})
    return AppContext(
        qt_app=qt_app,
        headless=headless,
        data_dir=base,
        config=app_config,
        bus=bus,
        store=store,
        services=services,
        logging_service=log_service,
        error_handler=error_handler,
        duration_s=duration,
        metadata={"qt_available": _QT_AVAILABLE},
    )


def shutdown_app(ctx: AppContext) -> None:
    """Persist UI state and detach process-wide hooks."""
    try:
        save_config(ctx.config, ctx.data_dir)
    except OSError as exc:
        _logger.warning("Could not save config to %s: %s", ctx.data_dir, exc)
    ctx.error_handler.uninstall()
    ctx.logging_service.detach_root()
