"""Navigation sidebar listing the resource screens."""

from __future__ import annotations

from typing import List, Optional, Tuple

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QListWidget, QListWidgetItem, QPushButton, QVBoxLayout, QWidget

__all__ = ["NAV_ITEMS", "Sidebar"]

NAV_ITEMS: List[Tuple[str, str]] = [
    ("users", "Users"),
    ("permissions", "Permissions"),
    ("roles", "Roles"),
    ("hierarchy", "Hierarchy"),
]

EXPANDED_WIDTH = 220
COLLAPSED_WIDTH = 56


class Sidebar(QWidget):
    screenSelected = pyqtSignal(str)
    collapsedChanged = pyqtSignal(bool)

    def __init__(self, parent: Optional[QWidget] = None, *, collapsed: bool = False):
        super().__init__(parent)
        self.setObjectName("sidebar")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        self.toggle_button = QPushButton()
        self.toggle_button.setAccessibleName("Toggle sidebar")
        self.toggle_button.clicked.connect(lambda: self.set_collapsed(not self._collapsed))  # type: ignore
        layout.addWidget(self.toggle_button)
        self.nav_list = QListWidget()
        for key, label in NAV_ITEMS:
            item = QListWidgetItem(label)
            item.setData(Qt.ItemDataRole.UserRole, key)
            item.setToolTip(label)
            self.nav_list.addItem(item)
        self.nav_list.currentItemChanged.connect(self._on_current_changed)  # type: ignore
        layout.addWidget(self.nav_list, 1)
        self._collapsed = not collapsed
        self.set_collapsed(collapsed)

    def _on_current_changed(self, current: QListWidgetItem | None, _previous=None):
        if current is not None:
            self.screenSelected.emit(current.data(Qt.ItemDataRole.UserRole))

    def select(self, key: str) -> None:
        for row in range(self.nav_list.count()):
            if self.nav_list.item(row).data(Qt.ItemDataRole.UserRole) == key:
                self.nav_list.setCurrentRow(row)
                return

    def current_key(self) -> Optional[str]:
        item = self.nav_list.currentItem()
        return item.data(Qt.ItemDataRole.UserRole) if item else None

    def is_collapsed(self) -> bool:
        return self._collapsed

    def set_collapsed(self, collapsed: bool) -> None:
        if collapsed == self._collapsed:
            return
        self._collapsed = collapsed
        for row, (_, label) in enumerate(NAV_ITEMS):
            self.nav_list.item(row).setText(label[0] if collapsed else label)
        self.toggle_button.setText(">" if collapsed else "<")
        self.setFixedWidth(COLLAPSED_WIDTH if collapsed else EXPANDED_WIDTH)
        self.collapsedChanged.emit(collapsed)
