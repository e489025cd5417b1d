"""Application layer: bootstrap and UI state persistence."""

from .bootstrap import AppContext, create_app, shutdown_app  # noqa: F401
from .config_store import (  # noqa: F401
    AppConfig,
    CONFIG_VERSION,
    load_config,
    save_config,
)

__all__ = [
    "AppContext",
    "create_app",
    "shutdown_app",
    "AppConfig",
    "CONFIG_VERSION",
    "load_config",
    "save_config",
]
