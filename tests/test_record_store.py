import json

import pytest

from admin_console.domain.models import PERMISSION_CATALOG, UserDraft
from admin_console.services.event_bus import ConsoleEvent, EventBus
from admin_console.services.record_store import (
    COLLECTIONS,
    RecordStore,
    UnknownCollectionError,
    assign_role_permissions,
    load_seed_collections,
    next_record_id,
)


def test_next_record_id():
    assert next_record_id([]) == 1
    assert next_record_id([{"id": 3}, {"id": 7}, {"id": 2}]) == 8
    assert next_record_id([{"name": "no id"}]) == 1


def test_bundled_seed_loads_every_collection():
    data = load_seed_collections()
    assert set(data) == set(COLLECTIONS)
    assert all(data[name] for name in COLLECTIONS)


def test_role_permissions_are_distinct_and_reproducible():
    roles = [{"id": i, "name": f"r{i}"} for i in range(6)]
    first = assign_role_permissions(roles, seed=7)
    second = assign_role_permissions(roles, seed=7)
    assert first == second
    for role in first:
        perms = role["permissions"]
        assert 2 <= len(perms) <= 4
        assert len(set(perms)) == len(perms)
        assert set(perms) <= set(PERMISSION_CATALOG)


def test_missing_seed_files_give_empty_collections(tmp_path):
    (tmp_path / "users.json").write_text(json.dumps([{"id": 1, "name": "A"}]), encoding="utf-8")
    store = RecordStore.from_seed(tmp_path)
    assert len(store.records("users")) == 1
    assert store.records("roles") == []


def test_append_assigns_next_id_and_replaces_list():
    store = RecordStore({"users": [{"id": 4, "name": "A"}]})
    before = store.records("users")
    stored = store.append("users", UserDraft(name="B", email="b@x.io").to_record())
    assert stored["id"] == 5
    assert before == [{"id": 4, "name": "A"}]  # old list untouched
    assert [r["id"] for r in store.records("users")] == [4, 5]


def test_append_to_empty_collection_starts_at_one():
    store = RecordStore()
    assert store.append("permissions", {"name": "x"})["id"] == 1


def test_append_publishes_record_created():
    bus = EventBus()
    seen = []
    bus.subscribe(ConsoleEvent.RECORD_CREATED, lambda e: seen.append(e.payload))
    store = RecordStore(bus=bus)
    stored = store.append("hierarchy", {"name": "QA"})
    assert seen == [{"collection": "hierarchy", "record": stored}]


def test_unknown_collection():
    store = RecordStore()
    with pytest.raises(UnknownCollectionError):
        store.records("groups")
    with pytest.raises(UnknownCollectionError):
        RecordStore({"groups": []})
