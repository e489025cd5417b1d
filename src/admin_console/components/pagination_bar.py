"""Pagination footer: rows-per-page selector, range label, prev/next.

The bar only reports user intent through its signals. The owning view
decides what to do and pushes the resulting state back with ``update_state``.
"""

from __future__ import annotations

from typing import Optional, Sequence

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QPushButton, QWidget

from admin_console.services.pagination import page_count, page_range_label

__all__ = ["PaginationBar"]


class PaginationBar(QWidget):
    pageRequested = pyqtSignal(int)
    pageSizeTextChosen = pyqtSignal(str)

    def __init__(self, page_size_options: Sequence[int], parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._page_index = 0
        self._page_size = page_size_options[0] if page_size_options else 1
        self._total = 0
        self._updating = False

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 0)
        layout.addStretch(1)
        layout.addWidget(QLabel("Rows per page:"))
        self.size_combo = QComboBox()
        self.size_combo.setObjectName("rowsPerPage")
        self.size_combo.setEditable(False)
        for size in page_size_options:
            self.size_combo.addItem(str(size))
        self.size_combo.currentTextChanged.connect(self._on_size_text)  # type: ignore
        layout.addWidget(self.size_combo)
        self.range_label = QLabel(page_range_label(0, self._page_size, 0))
        self.range_label.setObjectName("pageRangeLabel")
        layout.addWidget(self.range_label)
        self.prev_button = QPushButton("<")
        self.prev_button.setAccessibleName("Previous page")
        self.prev_button.clicked.connect(lambda: self.pageRequested.emit(self._page_index - 1))  # type: ignore
        layout.addWidget(self.prev_button)
        self.next_button = QPushButton(">")
        self.next_button.setAccessibleName("Next page")
        self.next_button.clicked.connect(lambda: self.pageRequested.emit(self._page_index + 1))  # type: ignore
        layout.addWidget(self.next_button)

    def _on_size_text(self, text: str) -> None:
        if not self._updating:
            self.pageSizeTextChosen.emit(text)

    def update_state(self, page_index: int, page_size: int, total_count: int) -> None:
        self._page_index = page_index
        self._page_size = page_size
        self._total = total_count
        self._updating = True
        try:
            idx = self.size_combo.findText(str(page_size))
            if idx < 0:
                # Sizes outside the offered options are shown as-is
                self.size_combo.addItem(str(page_size))
                idx = self.size_combo.count() - 1
            self.size_combo.setCurrentIndex(idx)
        finally:
            self._updating = False
        self.range_label.setText(page_range_label(page_index, page_size, total_count))
        pages = page_count(total_count, page_size)
        self.prev_button.setEnabled(page_index > 0)
        self.next_button.setEnabled(page_index + 1 < pages)

    def page_index(self) -> int:
        return self._page_index
