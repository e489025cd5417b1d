"""Reusable widgets shared by the resource screens."""

from __future__ import annotations

from .empty_state import EmptyStateWidget, empty_state_registry  # noqa: F401
from .pagination_bar import PaginationBar  # noqa: F401
from .search_input import SearchInput  # noqa: F401

__all__ = ["EmptyStateWidget", "empty_state_registry", "PaginationBar", "SearchInput"]
