"""Column sets and cell formatters for the four resource screens.

Each ``ScreenDefinition`` bundles what a screen hands to the generic table:
the collection it reads, its columns (with formatters) and its texts.
Formatters return plain strings; the table view renders them verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from admin_console.config import settings
from admin_console.models import ColumnDescriptor, Record, cell_text

__all__ = [
    "ScreenDefinition",
    "USER_COLUMNS",
    "ROLE_COLUMNS",
    "PERMISSION_COLUMNS",
    "HIERARCHY_COLUMNS",
    "SCREENS",
    "screen_definition",
    "format_short_date",
    "format_long_date",
    "format_list",
]


def _parse_iso(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        try:
            return datetime.combine(date.fromisoformat(text), datetime.min.time())
        except ValueError:
            return None


def format_short_date(value: Any, record: Record | None = None) -> str:
    """``2024-05-02T08:15:00Z`` -> ``May 2``."""
    parsed = _parse_iso(value)
    if parsed is None:
        return cell_text(value)
    return f"{parsed:%b} {parsed.day}"


def format_long_date(value: Any, record: Record | None = None) -> str:
    """``2023-01-15`` -> ``Jan 15, 2023``."""
    parsed = _parse_iso(value)
    if parsed is None:
        return cell_text(value)
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def format_list(value: Any, record: Record | None = None) -> str:
    if not value:
        return settings.MISSING_VALUE_PLACEHOLDER
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return cell_text(value)


USER_COLUMNS: List[ColumnDescriptor] = [
    ColumnDescriptor("name", "Name", sortable=True, width="25%"),
    ColumnDescriptor("email", "Email", sortable=True, width="25%"),
    ColumnDescriptor("role", "Role", sortable=True, width="20%"),
    ColumnDescriptor("status", "Status", sortable=True, width="15%"),
    ColumnDescriptor(
        "lastLogin", "Last Login", sortable=True, width="15%", formatter=format_short_date
    ),
]

ROLE_COLUMNS: List[ColumnDescriptor] = [
    ColumnDescriptor("name", "Role", sortable=True, width="20%"),
    ColumnDescriptor("description", "Description", sortable=True, width="30%"),
    ColumnDescriptor("permissions", "Permissions", width="25%", formatter=format_list),
    ColumnDescriptor("usersCount", "Users", numeric=True, sortable=True, width="10%"),
    ColumnDescriptor(
        "createdAt", "Created", sortable=True, width="15%", formatter=format_long_date
    ),
]

PERMISSION_COLUMNS: List[ColumnDescriptor] = [
    ColumnDescriptor("name", "Permission", sortable=True, width="25%"),
    ColumnDescriptor("description", "Description", sortable=True, width="35%"),
    ColumnDescriptor("category", "Category", sortable=True, width="15%"),
    ColumnDescriptor("assignedTo", "Assigned Roles", width="25%", formatter=format_list),
]

HIERARCHY_COLUMNS: List[ColumnDescriptor] = [
    ColumnDescriptor("name", "Name", sortable=True, width="35%"),
    ColumnDescriptor("type", "Type", sortable=True, width="20%"),
    ColumnDescriptor("parent", "Parent", sortable=True, width="30%"),
    ColumnDescriptor("members", "Members", numeric=True, sortable=True, width="15%"),
]


@dataclass(frozen=True)
class ScreenDefinition:
    key: str
    title: str
    collection: str
    columns: List[ColumnDescriptor]
    add_label: str
    empty_template: str
    default_page_size: int = settings.SCREEN_PAGE_SIZE


SCREENS: Dict[str, ScreenDefinition] = {
    "users": ScreenDefinition(
        key="users",
        title="User Management",
        collection="users",
        columns=USER_COLUMNS,
        add_label="Add User",
        empty_template="no_users",
    ),
    "permissions": ScreenDefinition(
        key="permissions",
        title="Permission Management",
        collection="permissions",
        columns=PERMISSION_COLUMNS,
        add_label="Add Permission",
        empty_template="no_permissions",
    ),
    "roles": ScreenDefinition(
        key="roles",
        title="Role Management",
        collection="roles",
        columns=ROLE_COLUMNS,
        add_label="Add Role",
        empty_template="no_roles",
    ),
    "hierarchy": ScreenDefinition(
        key="hierarchy",
        title="Organization Hierarchy",
        collection="hierarchy",
        columns=HIERARCHY_COLUMNS,
        add_label="Add Item",
        empty_template="no_hierarchy",
    ),
}


def screen_definition(key: str) -> ScreenDefinition:
    return SCREENS[key]
