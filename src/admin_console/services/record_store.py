"""Process-local record collections backing the resource screens.

The store owns one list per collection (users, roles, permissions,
hierarchy). Nothing is persisted; collections start from the JSON seed files
bundled with the package and live for the lifetime of the process.

Appending never mutates a list a table may still hold: the collection is
replaced by a new list so callers can hand it to a table as a wholesale
replacement.
"""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from threading import RLock
from typing import Any, Dict, Iterable, List, Mapping

from admin_console.config import settings
from admin_console.domain.models import PERMISSION_CATALOG
from .event_bus import ConsoleEvent, EventBus

__all__ = [
    "COLLECTIONS",
    "SEED_DIR",
    "UnknownCollectionError",
    "RecordStore",
    "next_record_id",
    "assign_role_permissions",
    "load_seed_collections",
]

_logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "roles", "permissions", "hierarchy")
SEED_DIR = Path(__file__).resolve().parent.parent / "data"


class UnknownCollectionError(KeyError):
    """Raised when a collection name is not one of ``COLLECTIONS``."""


def next_record_id(records: Iterable[Mapping[str, Any]]) -> int:
    """``max(0, existing ids) + 1``."""
    ids = [r.get("id") for r in records if isinstance(r.get("id"), int)]
    return max([0, *ids]) + 1


def assign_role_permissions(
    roles: Iterable[Mapping[str, Any]], seed: int = settings.ROLE_PERMISSION_SEED
) -> List[Dict[str, Any]]:
    """Give each seed role 2-4 distinct permissions from the catalog.

    Selection is pseudo-random but reproducible for a given ``seed``.
    """
    rng = random.Random(seed)
    out: List[Dict[str, Any]] = []
    for role in roles:
        catalog = list(PERMISSION_CATALOG)
        rng.shuffle(catalog)
        count = min(rng.randint(2, 4), len(catalog))
        out.append({**role, "permissions": catalog[:count]})
    return out


def load_seed_collections(seed_dir: str | Path = SEED_DIR) -> Dict[str, List[Dict[str, Any]]]:
    base = Path(seed_dir)
    data: Dict[str, List[Dict[str, Any]]] = {}
    for name in COLLECTIONS:
        path = base / f"{name}.json"
        if not path.exists():
            _logger.warning("Seed file missing: %s", path)
            data[name] = []
            continue
        data[name] = json.loads(path.read_text(encoding="utf-8"))
    data["roles"] = assign_role_permissions(data["roles"])
    return data


class RecordStore:
    def __init__(
        self,
        collections: Mapping[str, Iterable[Mapping[str, Any]]] | None = None,
        *,
        bus: EventBus | None = None,
    ):
        self._lock = RLock()
        self._bus = bus
        self._collections: Dict[str, List[Dict[str, Any]]] = {name: [] for name in COLLECTIONS}
        for name, records in (collections or {}).items():
            self._check(name)
            self._collections[name] = [dict(r) for r in records]

    @classmethod
    def from_seed(cls, seed_dir: str | Path = SEED_DIR, *, bus: EventBus | None = None) -> "RecordStore":
        store = cls(load_seed_collections(seed_dir), bus=bus)
        _logger.info(
            "Loaded seed data: %s",
            ", ".join(f"{n}={len(store.records(n))}" for n in COLLECTIONS),
        )
        return store

    @staticmethod
    def _check(name: str) -> None:
        if name not in COLLECTIONS:
            raise UnknownCollectionError(name)

    def records(self, name: str) -> List[Dict[str, Any]]:
        self._check(name)
        with self._lock:
            return self._collections[name]

    def append(self, name: str, record: Mapping[str, Any]) -> Dict[str, Any]:
        """Append ``record`` with the next id and return the stored copy."""
        self._check(name)
        with self._lock:
            current = self._collections[name]
            stored = {**record, "id": next_record_id(current)}
            self._collections[name] = [*current, stored]
        _logger.info("Created %s record id=%s", name, stored["id"])
        if self._bus is not None:
            self._bus.publish(ConsoleEvent.RECORD_CREATED, {"collection": name, "record": stored})
        return stored

