import logging

import pytest

from admin_console.models import ColumnDescriptor, SortDirection
from admin_console.services.event_bus import ConsoleEvent, EventBus
from admin_console.viewmodels.table_viewmodel import TableViewModel

COLUMNS = [
    ColumnDescriptor("name", "Name", sortable=True),
    ColumnDescriptor("age", "Age", numeric=True, sortable=True),
]


def _records(n):
    return [{"name": f"user{i:02d}", "age": 20 + i} for i in range(n)]


def test_initial_state_defaults_to_first_column():
    vm = TableViewModel(COLUMNS, _records(3))
    st = vm.state
    assert st.sort_key == "name"
    assert st.sort_direction is SortDirection.ASCENDING
    assert st.page_index == 0
    assert st.page_size == 10
    assert st.search_term == ""


def test_caller_defaults_are_honoured():
    vm = TableViewModel(
        COLUMNS,
        _records(3),
        default_sort_key="age",
        default_sort_direction=SortDirection.DESCENDING,
        default_page_size=5,
    )
    assert [r["age"] for r in vm.visible_rows()] == [22, 21, 20]
    assert vm.state.page_size == 5


def test_contract_violations_raise():
    with pytest.raises(ValueError):
        TableViewModel([], [])
    with pytest.raises(ValueError):
        TableViewModel([COLUMNS[0], COLUMNS[0]], [])
    with pytest.raises(ValueError):
        TableViewModel(COLUMNS, [], default_sort_key="missing")


def test_sortable_column_absent_from_records_warns(caplog):
    cols = COLUMNS + [ColumnDescriptor("ghost", "Ghost", sortable=True)]
    with caplog.at_level(logging.WARNING):
        TableViewModel(cols, _records(2))
    assert any("ghost" in rec.getMessage() for rec in caplog.records)


def test_request_sort_toggles_then_switches():
    vm = TableViewModel(COLUMNS, _records(3))
    vm.request_sort("name")
    assert vm.state.sort_direction is SortDirection.DESCENDING
    vm.request_sort("name")
    assert vm.state.sort_direction is SortDirection.ASCENDING
    vm.request_sort("name")
    vm.request_sort("age")
    assert vm.state.sort_key == "age"
    assert vm.state.sort_direction is SortDirection.ASCENDING


def test_sort_keeps_page_index():
    vm = TableViewModel(COLUMNS, _records(12), default_page_size=5)
    vm.set_page_index(2)
    vm.request_sort("age")
    assert vm.state.page_index == 2


def test_search_resets_page_index():
    vm = TableViewModel(COLUMNS, _records(12), default_page_size=5)
    vm.set_page_index(2)
    vm.set_search_term("user1")
    snap = vm.snapshot()
    assert snap.state.page_index == 0
    assert [r["name"] for r in snap.rows] == ["user10", "user11"]
    assert snap.total_count == 2


def test_page_size_change_resets_page_index():
    vm = TableViewModel(COLUMNS, _records(12), default_page_size=5)
    vm.set_page_index(1)
    vm.set_page_size(10)
    assert vm.state.page_index == 0
    assert len(vm.visible_rows()) == 10


def test_page_size_outside_options_is_accepted_verbatim():
    vm = TableViewModel(COLUMNS, _records(12), page_size_options=[5, 10])
    vm.set_page_size(7)
    assert vm.state.page_size == 7
    assert len(vm.visible_rows()) == 7


def test_page_size_text_rejects_garbage_and_keeps_prior(caplog):
    vm = TableViewModel(COLUMNS, _records(12), default_page_size=5)
    vm.set_page_index(1)
    with caplog.at_level(logging.WARNING):
        assert vm.set_page_size_text("ten") is False
        assert vm.set_page_size_text("0") is False
        assert vm.set_page_size_text("-3") is False
    assert vm.state.page_size == 5
    assert vm.state.page_index == 1
    assert vm.set_page_size_text(" 25 ") is True
    assert vm.state.page_size == 25
    assert vm.state.page_index == 0


def test_out_of_range_page_is_empty_not_error():
    vm = TableViewModel(COLUMNS, _records(5), default_page_size=2)
    vm.set_page_index(3)
    snap = vm.snapshot()
    assert snap.rows == []
    assert snap.total_count == 5
    assert snap.page_count == 3


def test_page_index_is_never_clamped():
    vm = TableViewModel(COLUMNS, _records(12), default_page_size=5)
    vm.set_page_index(2)
    assert vm.snapshot().rows != []
    vm.set_page_index(5)
    assert vm.snapshot().rows == []
    assert vm.state.page_index == 5


def test_replacing_records_resets_page_and_recomputes():
    vm = TableViewModel(COLUMNS, _records(12), default_page_size=5)
    vm.set_page_index(2)
    vm.set_records(_records(12) + [{"name": "aaa", "age": 1}])
    snap = vm.snapshot()
    assert snap.state.page_index == 0
    assert snap.total_count == 13
    assert snap.rows[0]["name"] == "aaa"


def test_replacing_columns_resets_page():
    vm = TableViewModel(COLUMNS, _records(12), default_page_size=5)
    vm.set_page_index(1)
    vm.set_columns(COLUMNS[:1])
    assert vm.state.page_index == 0
    assert vm.column_ids() == ["name"]


def test_source_collection_is_not_mutated():
    records = [{"name": "b", "age": 1}, {"name": "a", "age": 2}]
    vm = TableViewModel(COLUMNS, records)
    vm.request_sort("name")
    vm.snapshot()
    assert records == [{"name": "b", "age": 1}, {"name": "a", "age": 2}]


def test_state_is_a_copy():
    vm = TableViewModel(COLUMNS, _records(3))
    st = vm.state
    st.page_index = 9
    assert vm.state.page_index == 0


def test_pipeline_composes_filter_sort_paginate():
    records = [
        {"name": "Charlie", "age": 30},
        {"name": "alice", "age": 25},
        {"name": None, "age": 41},
        {"name": "Bob", "age": 25},
    ]
    vm = TableViewModel(COLUMNS, records, default_page_size=2)
    assert [r["name"] for r in vm.visible_rows()] == [None, "Bob"]
    vm.set_page_index(1)
    assert [r["name"] for r in vm.visible_rows()] == ["Charlie", "alice"]
    vm.set_search_term("25")
    vm.request_sort("age")
    # equal ages keep their filtered (input) order
    assert [r["name"] for r in vm.visible_rows()] == ["alice", "Bob"]


def test_transitions_publish_events():
    bus = EventBus()
    seen = []
    for evt in (
        ConsoleEvent.TABLE_SEARCH_CHANGED,
        ConsoleEvent.TABLE_SORT_REQUESTED,
        ConsoleEvent.TABLE_PAGE_CHANGED,
        ConsoleEvent.TABLE_PAGE_SIZE_CHANGED,
    ):
        bus.subscribe(evt, lambda e: seen.append((e.name, e.payload)))
    vm = TableViewModel(COLUMNS, _records(3), name="users", bus=bus)
    vm.set_search_term("x")
    vm.request_sort("age")
    vm.set_page_index(1)
    vm.set_page_size(25)
    assert seen == [
        ("table.search_changed", {"table": "users", "term": "x"}),
        ("table.sort_requested", {"table": "users", "column": "age", "direction": "asc"}),
        ("table.page_changed", {"table": "users", "page_index": 1}),
        ("table.page_size_changed", {"table": "users", "page_size": 25}),
    ]
