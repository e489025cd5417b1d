"""GUI view layer: generic data table, resource screens and navigation."""

from .data_table_view import DataTableView  # noqa: F401
from .resource_screen import ResourceScreen, build_screen  # noqa: F401
from .sidebar import Sidebar  # noqa: F401
