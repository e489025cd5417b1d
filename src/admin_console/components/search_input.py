"""Search field used above every data table."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtWidgets import QLineEdit, QWidget

from admin_console.config import settings

__all__ = ["SearchInput"]


class SearchInput(QLineEdit):
    """Line edit with a clear button; emits ``textChanged`` on every keystroke."""

    def __init__(self, placeholder: str = settings.SEARCH_PLACEHOLDER, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("searchInput")
        self.setPlaceholderText(placeholder)
        self.setClearButtonEnabled(True)
        self.setAccessibleName("Search")
