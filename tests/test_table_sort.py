from admin_console.models import SortDirection
from admin_console.services.table_sort import compare_records, compare_values, stable_sort

ASC = SortDirection.ASCENDING
DESC = SortDirection.DESCENDING


def test_concrete_code_point_order_with_null():
    rows = [{"name": "Charlie"}, {"name": "alice"}, {"name": None}]
    assert [r["name"] for r in stable_sort(rows, "name", ASC)] == [None, "Charlie", "alice"]
    assert [r["name"] for r in stable_sort(rows, "name", DESC)] == ["alice", "Charlie", None]


def test_missing_field_sorts_like_null():
    rows = [{"n": 2}, {}, {"n": 1}]
    assert stable_sort(rows, "n", ASC) == [{}, {"n": 1}, {"n": 2}]
    assert stable_sort(rows, "n", DESC) == [{"n": 2}, {"n": 1}, {}]


def test_numbers_sort_by_magnitude():
    rows = [{"n": 10}, {"n": 9}, {"n": 100}, {"n": -1.5}]
    assert [r["n"] for r in stable_sort(rows, "n")] == [-1.5, 9, 10, 100]


def test_compare_values_three_way():
    assert compare_values(1, 2) < 0
    assert compare_values(2, 1) > 0
    assert compare_values("a", "a") == 0
    assert compare_values(None, None) == 0
    assert compare_values(None, -10**9) < 0


def test_incomparable_values_compare_equal():
    assert compare_values("x", 3) == 0
    assert compare_records({"v": "x"}, {"v": 3}, "v", DESC) == 0


def test_mixed_types_do_not_raise():
    rows = [{"v": "b"}, {"v": 1}, {"v": "a"}, {"v": None}]
    result = stable_sort(rows, "v", ASC)
    assert sorted(map(id, result)) == sorted(map(id, rows))
    assert result[0] == {"v": None}


def test_stability_in_both_directions():
    rows = [
        {"k": 2, "tag": "a"},
        {"k": 1, "tag": "b"},
        {"k": 2, "tag": "c"},
        {"k": 1, "tag": "d"},
        {"k": None, "tag": "e"},
        {"k": None, "tag": "f"},
    ]
    asc = [r["tag"] for r in stable_sort(rows, "k", ASC)]
    desc = [r["tag"] for r in stable_sort(rows, "k", DESC)]
    assert asc == ["e", "f", "b", "d", "a", "c"]
    assert desc == ["a", "c", "b", "d", "e", "f"]


def test_toggle_mirrors_except_missing_values():
    rows = [{"v": 3}, {"v": None}, {"v": 1}, {"v": 2}]
    asc = stable_sort(rows, "v", ASC)
    desc = stable_sort(rows, "v", DESC)
    present_asc = [r["v"] for r in asc if r["v"] is not None]
    present_desc = [r["v"] for r in desc if r["v"] is not None]
    assert present_desc == list(reversed(present_asc))
    assert asc[0]["v"] is None and desc[-1]["v"] is None


def test_sort_does_not_mutate_input():
    rows = [{"v": 2}, {"v": 1}]
    stable_sort(rows, "v")
    assert rows == [{"v": 2}, {"v": 1}]
