"""Global configuration and constants for the admin console."""

from __future__ import annotations

import os
from typing import Final

DEFAULT_PAGE_SIZE_OPTIONS: Final = (5, 10, 25)
DEFAULT_PAGE_SIZE: Final = 10
# Resource screens start on the smallest page size
SCREEN_PAGE_SIZE: Final = 5

MISSING_VALUE_PLACEHOLDER: Final = "-"
DEFAULT_EMPTY_MESSAGE: Final = "No data available"
DEFAULT_ADD_LABEL: Final = "Add New"
SEARCH_PLACEHOLDER: Final = "Search..."

DATA_DIR: Final = os.environ.get("ADMIN_CONSOLE_DATA_DIR", "data")
LOG_LEVEL: Final = os.environ.get("ADMIN_CONSOLE_LOG_LEVEL", "INFO")

# Seed for deterministic permission assignment of the bundled roles
ROLE_PERMISSION_SEED: Final = 2024
