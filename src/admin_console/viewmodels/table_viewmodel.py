"""ViewModel driving the generic data table.

Owns the interactive ``TableState`` (search term, sort key and direction,
page index and size) and derives the visible page by running
filter -> stable sort -> paginate from scratch on every ``snapshot()``.
Nothing derived is cached, so replacing the record collection can never
leave a stale view behind.

Reset rules:
 - search term, record collection or column set change -> page index 0
 - page size change -> page index 0
 - sort request -> page index untouched

Every transition is announced on the optional event bus.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from admin_console.config import settings
from admin_console.models import (
    ColumnDescriptor,
    Record,
    SortDirection,
    TableSnapshot,
    TableState,
)
from admin_console.services.event_bus import ConsoleEvent, EventBus
from admin_console.services.pagination import page_count, paginate
from admin_console.services.table_filter import filter_records
from admin_console.services.table_sort import stable_sort

__all__ = ["TableViewModel"]

_logger = logging.getLogger(__name__)


class TableViewModel:
    def __init__(
        self,
        columns: Sequence[ColumnDescriptor],
        records: Iterable[Record] = (),
        *,
        default_sort_key: Optional[str] = None,
        default_sort_direction: SortDirection = SortDirection.ASCENDING,
        page_size_options: Sequence[int] = settings.DEFAULT_PAGE_SIZE_OPTIONS,
        default_page_size: int = settings.DEFAULT_PAGE_SIZE,
        name: str = "table",
        bus: EventBus | None = None,
    ):
        self.name = name
        self._bus = bus
        self._columns: List[ColumnDescriptor] = self._validated_columns(columns)
        self._records: List[Record] = list(records)
        self.page_size_options: List[int] = list(page_size_options)
        if default_sort_key is None:
            default_sort_key = self._columns[0].id
        elif default_sort_key not in self.column_ids():
            raise ValueError(f"Default sort key '{default_sort_key}' is not a declared column")
        self._state = TableState(
            sort_key=default_sort_key,
            sort_direction=SortDirection(default_sort_direction),
            page_index=0,
            page_size=default_page_size,
            search_term="",
        )
        self._warn_missing_sort_fields()

    # Inputs -----------------------------------------------------------
    @staticmethod
    def _validated_columns(columns: Sequence[ColumnDescriptor]) -> List[ColumnDescriptor]:
        cols = list(columns)
        if not cols:
            raise ValueError("A table needs at least one column")
        seen: set[str] = set()
        for col in cols:
            if col.id in seen:
                raise ValueError(f"Duplicate column id '{col.id}'")
            seen.add(col.id)
        return cols

    def _warn_missing_sort_fields(self) -> None:
        if not self._records:
            return
        for col in self._columns:
            if not col.sortable:
                continue
            if not any(_has_field(r, col.id) for r in self._records):
                _logger.warning(
                    "Table %s: sortable column '%s' is absent from every record", self.name, col.id
                )

    @property
    def columns(self) -> List[ColumnDescriptor]:
        return list(self._columns)

    def column_ids(self) -> List[str]:
        return [c.id for c in self._columns]

    def column(self, column_id: str) -> Optional[ColumnDescriptor]:
        return next((c for c in self._columns if c.id == column_id), None)

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    def set_records(self, records: Iterable[Record]) -> None:
        """Replace the source collection wholesale; returns to the first page."""
        self._records = list(records)
        self._state.page_index = 0
        _logger.debug("Table %s: %d records loaded", self.name, len(self._records))
        self._warn_missing_sort_fields()

    def set_columns(self, columns: Sequence[ColumnDescriptor]) -> None:
        self._columns = self._validated_columns(columns)
        self._state.page_index = 0
        self._warn_missing_sort_fields()

    # State ------------------------------------------------------------
    @property
    def state(self) -> TableState:
        return self._state.copy()

    def set_search_term(self, term: str) -> None:
        self._state.search_term = term or ""
        self._state.page_index = 0
        _logger.debug("Table %s: search %r", self.name, self._state.search_term)
        self._publish(ConsoleEvent.TABLE_SEARCH_CHANGED, term=self._state.search_term)

    def request_sort(self, column_id: str) -> None:
        """Toggle direction on the active key, otherwise sort ascending by ``column_id``."""
        if column_id == self._state.sort_key:
            self._state.sort_direction = self._state.sort_direction.toggled()
        else:
            self._state.sort_key = column_id
            self._state.sort_direction = SortDirection.ASCENDING
        _logger.debug(
            "Table %s: sort %s %s", self.name, column_id, self._state.sort_direction.value
        )
        self._publish(
            ConsoleEvent.TABLE_SORT_REQUESTED,
            column=column_id,
            direction=self._state.sort_direction.value,
        )

    def set_page_index(self, page_index: int) -> None:
        # Not clamped: an index past the end simply renders an empty page.
        self._state.page_index = page_index
        self._publish(ConsoleEvent.TABLE_PAGE_CHANGED, page_index=page_index)

    def set_page_size(self, page_size: int) -> None:
        self._state.page_size = page_size
        self._state.page_index = 0
        self._publish(ConsoleEvent.TABLE_PAGE_SIZE_CHANGED, page_size=page_size)

    def set_page_size_text(self, text: str) -> bool:
        """Apply a page size typed or selected as text.

        Non-numeric or non-positive input is rejected and the current page
        size kept. Returns whether the new size was applied.
        """
        try:
            size = int(str(text).strip(), 10)
        except (TypeError, ValueError):
            _logger.warning("Table %s: ignoring page size %r", self.name, text)
            return False
        if size <= 0:
            _logger.warning("Table %s: ignoring non-positive page size %d", self.name, size)
            return False
        self.set_page_size(size)
        return True

    # Derived views ----------------------------------------------------
    def filtered_records(self) -> List[Record]:
        return filter_records(self._records, self._columns, self._state.search_term)

    def ordered_records(self) -> List[Record]:
        return stable_sort(
            self.filtered_records(), self._state.sort_key, self._state.sort_direction
        )

    def snapshot(self) -> TableSnapshot:
        ordered = self.ordered_records()
        page = paginate(ordered, self._state.page_index, self._state.page_size)
        return TableSnapshot(
            rows=page.rows,
            total_count=page.total_count,
            state=self.state,
            page_count=page_count(page.total_count, self._state.page_size),
        )

    def visible_rows(self) -> List[Record]:
        return self.snapshot().rows

    # Internal ---------------------------------------------------------
    def _publish(self, event: ConsoleEvent, **payload) -> None:
        if self._bus is not None:
            self._bus.publish(event, {"table": self.name, **payload})


def _has_field(record: Record, field_id: str) -> bool:
    try:
        return field_id in record
    except TypeError:
        return hasattr(record, field_id)
