"""Main window: navigation sidebar plus one stacked ResourceScreen per collection."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PyQt6.QtWidgets import QHBoxLayout, QMainWindow, QStackedWidget, QWidget

from admin_console.app.config_store import AppConfig
from admin_console.services.event_bus import ConsoleEvent, EventBus
from admin_console.services.record_store import RecordStore
from admin_console.views.resource_screen import ResourceScreen, build_screen
from admin_console.views.sidebar import NAV_ITEMS, Sidebar

__all__ = ["MainWindow"]

_logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        store: RecordStore,
        *,
        config: AppConfig | None = None,
        bus: EventBus | None = None,
    ):
        super().__init__()
        self.setWindowTitle("Admin Console")
        self.store = store
        self.config = config or AppConfig()
        self.bus = bus
        self.screens: Dict[str, ResourceScreen] = {}
        self._build_ui()
        self._restore_geometry()
        self.show_screen(self.config.last_screen)

    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        layout = QHBoxLayout(central)
        self.sidebar = Sidebar(collapsed=self.config.sidebar_collapsed)
        self.stack = QStackedWidget()
        for key, _label in NAV_ITEMS:
            screen = build_screen(key, self.store, bus=self.bus)
            self.screens[key] = screen
            self.stack.addWidget(screen)
        self.sidebar.screenSelected.connect(self.show_screen)  # type: ignore
        self.sidebar.collapsedChanged.connect(self._on_sidebar_collapsed)  # type: ignore
        layout.addWidget(self.sidebar)
        layout.addWidget(self.stack, 1)

    def _restore_geometry(self):
        cfg = self.config
        if cfg.is_geometry_complete():
            self.setGeometry(cfg.window_x, cfg.window_y, cfg.window_w, cfg.window_h)
        else:
            self.resize(1200, 760)

    def show_screen(self, key: str) -> Optional[ResourceScreen]:
        screen = self.screens.get(key)
        if screen is None:
            _logger.warning("Unknown screen '%s', showing users", key)
            key = "users"
            screen = self.screens[key]
        if self.stack.currentWidget() is not screen:
            self.stack.setCurrentWidget(screen)
        if self.sidebar.current_key() != key:
            self.sidebar.select(key)
        if self.config.last_screen != key:
            self.config.last_screen = key
            if self.bus is not None:
                self.bus.publish(ConsoleEvent.SCREEN_CHANGED, {"screen": key})
        return screen

    def current_screen(self) -> ResourceScreen:
        return self.stack.currentWidget()  # type: ignore[return-value]

    def _on_sidebar_collapsed(self, collapsed: bool):
        self.config.sidebar_collapsed = collapsed

    def closeEvent(self, event):  # pragma: no cover - UI callback
        geo = self.geometry()
        self.config.window_x, self.config.window_y = geo.x(), geo.y()
        self.config.window_w, self.config.window_h = geo.width(), geo.height()
        self.config.maximized = self.isMaximized()
        super().closeEvent(event)
