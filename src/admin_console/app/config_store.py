"""Persistence of lightweight UI state between sessions.

Only presentation state is stored (window geometry, last opened screen,
sidebar collapse). Record collections are never written to disk.

A missing, corrupt or version-mismatched file yields defaults instead of
raising.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

__all__ = ["AppConfig", "load_config", "save_config", "CONFIG_VERSION", "DEFAULT_FILENAME"]

_logger = logging.getLogger(__name__)

CONFIG_VERSION = 1

DEFAULT_FILENAME = "app_state.json"


@dataclass(slots=True)
class AppConfig:
    """Serializable UI state.

    Attributes
    ----------
    version: Schema version for migration handling.
    window_x, window_y, window_w, window_h: Last window geometry (None if unknown).
    maximized: Whether the window was maximized at shutdown.
    last_screen: Key of the screen shown last ("users", "roles", ...).
    sidebar_collapsed: Whether the navigation sidebar was collapsed.
    """

    version: int = CONFIG_VERSION
    window_x: Optional[int] = None
    window_y: Optional[int] = None
    window_w: Optional[int] = None
    window_h: Optional[int] = None
    maximized: bool = False
    last_screen: str = "users"
    sidebar_collapsed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls(
            version=int(data.get("version", CONFIG_VERSION)),
            window_x=data.get("window_x"),
            window_y=data.get("window_y"),
            window_w=data.get("window_w"),
            window_h=data.get("window_h"),
            maximized=bool(data.get("maximized", False)),
            last_screen=str(data.get("last_screen") or "users"),
            sidebar_collapsed=bool(data.get("sidebar_collapsed", False)),
        )

    def is_geometry_complete(self) -> bool:
        return None not in (self.window_x, self.window_y, self.window_w, self.window_h)


def _resolve_path(base_dir: str | Path | None) -> Path:
    base = Path(base_dir) if base_dir else Path.cwd()
    return base / DEFAULT_FILENAME


def load_config(base_dir: str | Path | None = None) -> AppConfig:
    path = _resolve_path(base_dir)
    if not path.exists():
        return AppConfig()
    try:
        cfg = AppConfig.from_dict(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        _logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return AppConfig()
    if cfg.version != CONFIG_VERSION:
        _logger.info("Config version %s != %s, using defaults", cfg.version, CONFIG_VERSION)
        return AppConfig()
    return cfg


def save_config(cfg: AppConfig, base_dir: str | Path | None = None) -> Path:
    """Write ``cfg`` atomically (temp file + replace) and return the path."""
    path = _resolve_path(base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(cfg.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    tmp.replace(path)
    return path
