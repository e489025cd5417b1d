"""DataTableView

Generic searchable, sortable, paginated table shared by every resource
screen. All state lives in the backing ``TableViewModel``; this widget turns
user gestures into view model transitions and re-renders the snapshot after
each one.

Signals mirror the transitions: ``searchChanged``, ``sortRequested``,
``pageChanged``, ``pageSizeChanged`` plus ``createRequested`` for the add
button (creation itself is the calling screen's job).
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from admin_console.components.empty_state import EmptyStateWidget
from admin_console.components.pagination_bar import PaginationBar
from admin_console.components.search_input import SearchInput
from admin_console.config import settings
from admin_console.models import ColumnDescriptor, Record, SortDirection, TableSnapshot
from admin_console.services.event_bus import EventBus
from admin_console.viewmodels.table_viewmodel import TableViewModel

__all__ = ["DataTableView", "column_widths"]

_logger = logging.getLogger(__name__)


def column_widths(columns: Sequence[ColumnDescriptor], total: int) -> List[int]:
    """Split ``total`` pixels between ``columns`` according to their width hints.

    ``"25%"`` takes that share of the total and ``"120px"`` (or ``"120"``) a
    fixed width. Columns without a hint, or with ``"auto"``, share the rest equally.
    """
    widths: List[Optional[int]] = []
    for col in columns:
        hint = (col.width or "").strip().lower()
        width = None
        try:
            if hint.endswith("%"):
                width = int(total * float(hint[:-1]) / 100)
            elif hint and hint != "auto":
                width = int(float(hint.removesuffix("px")))
        except ValueError:
            _logger.warning("Column %s: ignoring width hint %r", col.id, col.width)
        widths.append(width)
    auto = widths.count(None)
    remaining = max(0, total - sum(w for w in widths if w is not None))
    share = remaining // auto if auto else 0
    return [share if w is None else w for w in widths]


class DataTableView(QWidget):
    searchChanged = pyqtSignal(str)
    sortRequested = pyqtSignal(str)
    pageChanged = pyqtSignal(int)
    pageSizeChanged = pyqtSignal(int)
    createRequested = pyqtSignal()

    def __init__(
        self,
        columns: Sequence[ColumnDescriptor],
        records: Iterable[Record] = (),
        *,
        default_sort_key: Optional[str] = None,
        default_sort_direction: SortDirection = SortDirection.ASCENDING,
        page_size_options: Sequence[int] = settings.DEFAULT_PAGE_SIZE_OPTIONS,
        default_page_size: int = settings.DEFAULT_PAGE_SIZE,
        on_create_requested: Optional[Callable[[], None]] = None,
        add_button_label: str = settings.DEFAULT_ADD_LABEL,
        empty_template: str = "no_rows",
        empty_message: Optional[str] = None,
        name: str = "table",
        bus: EventBus | None = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.viewmodel = TableViewModel(
            columns,
            records,
            default_sort_key=default_sort_key,
            default_sort_direction=default_sort_direction,
            page_size_options=page_size_options,
            default_page_size=default_page_size,
            name=name,
            bus=bus,
        )
        self._on_create_requested = on_create_requested
        self._add_button_label = add_button_label
        self._empty_template = empty_template
        self._empty_message = empty_message
        self._snapshot: TableSnapshot | None = None
        self._build_ui()
        self.refresh()

    # UI ---------------------------------------------------------------
    def _build_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        toolbar = QHBoxLayout()
        self.search_input = SearchInput()
        self.search_input.textChanged.connect(self._on_search_text)  # type: ignore
        toolbar.addWidget(self.search_input, 1)
        self.add_button = QPushButton(self._add_button_label)
        self.add_button.setObjectName("tableAddButton")
        self.add_button.clicked.connect(self._on_add_clicked)  # type: ignore
        self.add_button.setVisible(self._on_create_requested is not None)
        toolbar.addWidget(self.add_button)
        root.addLayout(toolbar)

        columns = self.viewmodel.columns
        self.table = QTableWidget(0, len(columns))
        self.table.setObjectName("dataTable")
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.verticalHeader().setVisible(False)
        self._apply_header_labels()
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.Interactive)
        header.setStretchLastSection(False)
        header.setSectionsClickable(True)
        header.setSortIndicatorShown(True)
        header.sectionClicked.connect(self._on_header_clicked)  # type: ignore
        root.addWidget(self.table, 1)

        self.empty_state = EmptyStateWidget(self._empty_template, message=self._empty_message)
        self.empty_state.setObjectName("tableEmptyState")
        root.addWidget(self.empty_state)

        self.pagination = PaginationBar(self.viewmodel.page_size_options)
        self.pagination.pageRequested.connect(self.set_page_index)  # type: ignore
        self.pagination.pageSizeTextChosen.connect(self._on_page_size_text)  # type: ignore
        root.addWidget(self.pagination)

    def _apply_header_labels(self):
        columns = self.viewmodel.columns
        self.table.setColumnCount(len(columns))
        for idx, col in enumerate(columns):
            item = QTableWidgetItem(col.label)
            align = Qt.AlignmentFlag.AlignRight if col.numeric else Qt.AlignmentFlag.AlignLeft
            item.setTextAlignment(align | Qt.AlignmentFlag.AlignVCenter)
            self.table.setHorizontalHeaderItem(idx, item)

    # Rendering ----------------------------------------------------------
    def refresh(self) -> TableSnapshot:
        snap = self.viewmodel.snapshot()
        self._snapshot = snap
        columns = self.viewmodel.columns
        self.table.clearContents()
        self.table.setRowCount(len(snap.rows))
        for r, record in enumerate(snap.rows):
            for c, col in enumerate(columns):
                rendered = col.render(record)
                if isinstance(rendered, QWidget):
                    self.table.setCellWidget(r, c, rendered)
                    continue
                item = QTableWidgetItem(rendered if isinstance(rendered, str) else str(rendered))
                align = Qt.AlignmentFlag.AlignRight if col.numeric else Qt.AlignmentFlag.AlignLeft
                item.setTextAlignment(align | Qt.AlignmentFlag.AlignVCenter)
                self.table.setItem(r, c, item)
        self._update_sort_header(snap)
        self._update_empty_state(snap)
        self.pagination.update_state(snap.state.page_index, snap.state.page_size, snap.total_count)
        return snap

    def _update_empty_state(self, snap: TableSnapshot):
        if snap.is_empty:
            if snap.state.search_term and self.viewmodel.records:
                self.empty_state.set_template("no_matches")
            else:
                self.empty_state.set_template(self._empty_template, message=self._empty_message)
        self.empty_state.setVisible(snap.is_empty)

    def _update_sort_header(self, snap: TableSnapshot):
        ids = self.viewmodel.column_ids()
        key = snap.state.sort_key
        header = self.table.horizontalHeader()
        if key not in ids:
            header.setSortIndicator(-1, Qt.SortOrder.AscendingOrder)
            return
        order = (
            Qt.SortOrder.DescendingOrder
            if snap.state.sort_direction is SortDirection.DESCENDING
            else Qt.SortOrder.AscendingOrder
        )
        header.setSortIndicator(ids.index(key), order)
        for idx, col in enumerate(self.viewmodel.columns):
            item = self.table.horizontalHeaderItem(idx)
            if item is None:
                continue
            if col.id == key:
                word = "descending" if order == Qt.SortOrder.DescendingOrder else "ascending"
                item.setToolTip(f"{col.label} (sorted {word})")
            elif col.sortable:
                item.setToolTip(f"Sort by {col.label}")
            else:
                item.setToolTip(col.label)

    def apply_column_widths(self, total: Optional[int] = None) -> List[int]:
        """Size header sections from the column width hints."""
        if total is None:
            total = self.table.viewport().width()
        widths = column_widths(self.viewmodel.columns, total)
        header = self.table.horizontalHeader()
        for idx, width in enumerate(widths):
            header.resizeSection(idx, width)
        return widths

    def resizeEvent(self, event):  # noqa: N802 - Qt override
        super().resizeEvent(event)
        self.apply_column_widths()

    # Inputs -------------------------------------------------------------
    def set_records(self, records: Iterable[Record]) -> None:
        """Replace the displayed collection (returns to the first page)."""
        self.viewmodel.set_records(records)
        self.refresh()

    def set_columns(self, columns: Sequence[ColumnDescriptor]) -> None:
        self.viewmodel.set_columns(columns)
        self._apply_header_labels()
        self.apply_column_widths()
        self.refresh()

    # Transitions --------------------------------------------------------
    def set_search_term(self, term: str) -> None:
        if self.search_input.text() != term:
            # Routed back through _on_search_text by textChanged
            self.search_input.setText(term)
            return
        self._apply_search(term)

    def _on_search_text(self, text: str) -> None:
        self._apply_search(text)

    def _apply_search(self, term: str) -> None:
        self.viewmodel.set_search_term(term)
        self.refresh()
        self.searchChanged.emit(term)

    def request_sort(self, column_id: str) -> None:
        self.viewmodel.request_sort(column_id)
        self.refresh()
        self.sortRequested.emit(column_id)

    def _on_header_clicked(self, logical_index: int) -> None:
        columns = self.viewmodel.columns
        if 0 <= logical_index < len(columns) and columns[logical_index].sortable:
            self.request_sort(columns[logical_index].id)
        else:
            # Header click toggles Qt's own indicator; restore ours
            self.refresh()

    def set_page_index(self, page_index: int) -> None:
        self.viewmodel.set_page_index(page_index)
        self.refresh()
        self.pageChanged.emit(page_index)

    def set_page_size(self, page_size: int) -> None:
        self.viewmodel.set_page_size(page_size)
        self.refresh()
        self.pageSizeChanged.emit(page_size)

    def _on_page_size_text(self, text: str) -> None:
        if self.viewmodel.set_page_size_text(text):
            self.refresh()
            self.pageSizeChanged.emit(self.viewmodel.state.page_size)
        else:
            self.refresh()

    def _on_add_clicked(self) -> None:
        self.createRequested.emit()
        if self._on_create_requested is not None:
            self._on_create_requested()

    # Testing helpers ------------------------------------------------------
    def snapshot(self) -> TableSnapshot | None:
        return self._snapshot

    def cell_text(self, row: int, column: int) -> str:
        item = self.table.item(row, column)
        return item.text() if item else ""

    def column_texts(self, column_id: str) -> List[str]:
        idx = self.viewmodel.column_ids().index(column_id)
        return [self.cell_text(r, idx) for r in range(self.table.rowCount())]

    def is_empty_state_active(self) -> bool:
        return self._snapshot is not None and self._snapshot.is_empty
