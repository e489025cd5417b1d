"""Fixed-size page windows over an ordered record sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")

__all__ = ["PageSlice", "paginate", "page_count", "page_range_label"]


@dataclass(frozen=True)
class PageSlice(Generic[T]):
    rows: List[T]
    total_count: int


def paginate(rows: Sequence[T], page_index: int, page_size: int) -> PageSlice[T]:
    """Return the window ``[page_index*page_size, +page_size)`` of ``rows``.

    Out-of-range pages yield an empty slice; ``total_count`` always reports the
    full length of ``rows``.
    """
    total = len(rows)
    if page_size <= 0 or page_index < 0:
        return PageSlice(rows=[], total_count=total)
    start = page_index * page_size
    return PageSlice(rows=list(rows[start : start + page_size]), total_count=total)


def page_count(total_count: int, page_size: int) -> int:
    if page_size <= 0 or total_count <= 0:
        return 0
    return (total_count + page_size - 1) // page_size


def page_range_label(page_index: int, page_size: int, total_count: int) -> str:
    """Human readable range such as ``"6–10 of 12"``."""
    if total_count <= 0 or page_size <= 0:
        return "0–0 of 0" if total_count <= 0 else f"0–0 of {total_count}"
    first = page_index * page_size + 1
    if page_index < 0 or first > total_count:
        return f"0–0 of {total_count}"
    last = min(total_count, (page_index + 1) * page_size)
    return f"{first}–{last} of {total_count}"
