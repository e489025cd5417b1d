"""ResourceScreen

One screen per resource collection: title, add button, the shared
DataTableView and the matching create dialog. The screen owns nothing
itself; records come from the RecordStore and are handed to the table as a
wholesale replacement after each creation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from PyQt6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from admin_console.domain.models import ValidationError
from admin_console.services.event_bus import EventBus
from admin_console.services.record_store import RecordStore
from admin_console.viewmodels.resource_columns import ScreenDefinition, screen_definition
from .create_dialogs import CreateRecordDialog, dialog_for
from .data_table_view import DataTableView

__all__ = ["ResourceScreen", "build_screen"]

_logger = logging.getLogger(__name__)


class ResourceScreen(QWidget):
    def __init__(
        self,
        definition: ScreenDefinition,
        store: RecordStore,
        *,
        bus: EventBus | None = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.definition = definition
        self.store = store
        self.setObjectName(f"{definition.key}Screen")

        root = QVBoxLayout(self)
        header = QHBoxLayout()
        self.title_label = QLabel(definition.title)
        self.title_label.setObjectName("viewTitleLabel")
        header.addWidget(self.title_label)
        header.addStretch(1)
        self.add_button = QPushButton(definition.add_label)
        self.add_button.setObjectName("screenAddButton")
        self.add_button.clicked.connect(self.open_create_dialog)  # type: ignore
        header.addWidget(self.add_button)
        root.addLayout(header)

        self.table_view = DataTableView(
            definition.columns,
            store.records(definition.collection),
            default_page_size=definition.default_page_size,
            empty_template=definition.empty_template,
            name=definition.key,
            bus=bus,
        )
        self.table_view.empty_state.actionRequested.connect(self._on_empty_action)  # type: ignore
        root.addWidget(self.table_view, 1)

    def _on_empty_action(self, _template_key: str) -> None:
        self.open_create_dialog()

    def make_dialog(self) -> CreateRecordDialog:
        kwargs: Dict[str, Any] = {}
        if self.definition.collection == "hierarchy":
            kwargs["parent_names"] = [
                r["name"] for r in self.store.records("hierarchy") if r.get("name")
            ]
        return dialog_for(self.definition.collection, self, **kwargs)

    def open_create_dialog(self) -> Optional[Dict[str, Any]]:  # pragma: no cover - modal UI
        dialog = self.make_dialog()
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return None
        return self.submit(dialog)

    def submit(self, dialog: CreateRecordDialog) -> Optional[Dict[str, Any]]:
        """Create a record from an accepted dialog and refresh the table."""
        try:
            record = self.store.append(self.definition.collection, dialog.draft().to_record())
        except ValidationError as exc:
            _logger.warning("Rejected %s input: %s", self.definition.collection, exc)
            return None
        self.table_view.set_records(self.store.records(self.definition.collection))
        return record


def build_screen(
    key: str, store: RecordStore, *, bus: EventBus | None = None, parent: Optional[QWidget] = None
) -> ResourceScreen:
    return ResourceScreen(screen_definition(key), store, bus=bus, parent=parent)
