"""Free-text record filter used by every table.

A record matches when any declared column holds a value whose textual form
contains the search term, compared case-insensitively. Missing values never
match and never raise. Input order is preserved.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from admin_console.models import ColumnDescriptor, Record, field_value, value_text

__all__ = ["normalize_term", "record_matches", "filter_records"]


def normalize_term(term: str | None) -> str:
    return (term or "").lower()


def record_matches(record: Record, columns: Sequence[ColumnDescriptor], term: str) -> bool:
    needle = normalize_term(term)
    if not needle:
        return True
    for column in columns:
        text = value_text(field_value(record, column.id))
        if text is not None and needle in text.lower():
            return True
    return False


def filter_records(
    records: Iterable[Record], columns: Sequence[ColumnDescriptor], term: str | None
) -> List[Record]:
    """Return the records matching ``term`` in their original relative order."""
    needle = normalize_term(term)
    if not needle:
        return list(records)
    return [r for r in records if record_matches(r, columns, needle)]
