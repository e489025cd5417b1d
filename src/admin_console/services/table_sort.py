"""Single-column comparator and stable sort for tabular view models.

Missing values (None or absent fields) act as the logical minimum: they lead
an ascending order and trail a descending one. Present values use their
natural ordering (numbers by magnitude, strings by code point). Values that
cannot be compared with each other count as equal instead of raising.

Ties are broken on the original position so the result is stable in both
directions.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, List, Tuple

from admin_console.models import Record, SortDirection, field_value

__all__ = ["compare_values", "compare_records", "stable_sort"]


def compare_values(a: Any, b: Any) -> int:
    """Ascending three-way comparison with missing values as minimum."""
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    try:
        if a < b:
            return -1
        if b < a:
            return 1
    except TypeError:
        # Mixed types in one column; treat as equal
        return 0
    return 0


def compare_records(a: Record, b: Record, sort_key: str, direction: SortDirection) -> int:
    """Order two records by ``sort_key``.

    Returns a negative number when ``a`` goes first, positive when ``b`` goes
    first and 0 when they are equal.
    """
    result = compare_values(field_value(a, sort_key), field_value(b, sort_key))
    return -result if direction is SortDirection.DESCENDING else result


def stable_sort(
    records: Iterable[Record], sort_key: str, direction: SortDirection = SortDirection.ASCENDING
) -> List[Record]:
    indexed: List[Tuple[int, Record]] = list(enumerate(records))

    def _cmp(left: Tuple[int, Record], right: Tuple[int, Record]) -> int:
        order = compare_records(left[1], right[1], sort_key, direction)
        if order != 0:
            return order
        return left[0] - right[0]

    indexed.sort(key=cmp_to_key(_cmp))
    return [record for _, record in indexed]
