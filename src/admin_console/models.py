"""Table-facing models shared by the pipeline, view models and views.

Records are plain mappings (field name -> value). The table layer never
requires a particular record shape; it only reads the fields named by the
column descriptors it is given.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional

from admin_console.config import settings

__all__ = [
    "Record",
    "Formatter",
    "SortDirection",
    "ColumnDescriptor",
    "TableState",
    "TableSnapshot",
    "field_value",
    "value_text",
    "cell_text",
]

Record = Mapping[str, Any]
Formatter = Callable[[Any, Record], Any]


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def toggled(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


@dataclass(frozen=True)
class ColumnDescriptor:
    """Describes how one record field is labeled, sorted and rendered.

    Attributes
    ----------
    id: Field name read from each record.
    label: Header text.
    numeric: Right-align the column (alignment only, no effect on sorting).
    sortable: Whether the header offers a sort affordance.
    width: Optional width hint: "25%", "120px" or "auto".
    formatter: Optional ``(value, record) -> renderable`` callback.
    """

    id: str
    label: str
    numeric: bool = False
    sortable: bool = False
    width: Optional[str] = None
    formatter: Optional[Formatter] = field(default=None, compare=False)

    def render(self, record: Record) -> Any:
        value = field_value(record, self.id)
        if self.formatter is not None:
            return self.formatter(value, record)
        return cell_text(value)


@dataclass
class TableState:
    """The only mutable state of a table; every view is derived from it."""

    sort_key: str
    sort_direction: SortDirection = SortDirection.ASCENDING
    page_index: int = 0
    page_size: int = settings.DEFAULT_PAGE_SIZE
    search_term: str = ""

    def copy(self) -> "TableState":
        return replace(self)


@dataclass(frozen=True)
class TableSnapshot:
    """Result of one pipeline run (filter -> sort -> paginate)."""

    rows: List[Record]
    total_count: int
    state: TableState
    page_count: int

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0


def field_value(record: Record, field_id: str) -> Any:
    """Return the value stored under ``field_id`` or None when absent."""
    try:
        return record.get(field_id)
    except AttributeError:
        return getattr(record, field_id, None)


def value_text(value: Any) -> Optional[str]:
    """Textual form of a value as used for searching and default rendering.

    Returns None for missing values so callers can distinguish "absent" from
    an empty string.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        parts = (value_text(item) for item in value)
        return ",".join(p if p is not None else "" for p in parts)
    return str(value)


def cell_text(value: Any) -> str:
    text = value_text(value)
    return settings.MISSING_VALUE_PLACEHOLDER if text is None else text
