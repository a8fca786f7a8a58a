"""Unit tests for RecordStore."""

import pytest

from kv_parser.classifier import LineClassifier
from kv_parser.errors import StoreSealedError
from kv_parser.models import Record
from kv_parser.store import RecordStore

SAMPLE = ["user=alice\n", "role=admin\n", "id=42\n"]


# ---- insert / get ---------------------------------------------------------


def test_insert_assigns_sequential_indices():
    store = RecordStore()
    assert store.insert("a", "1") == 0
    assert store.insert("b", "2") == 1
    assert store.get("a") == (0, "1")
    assert store.get("b") == (1, "2")


def test_get_missing_returns_none():
    store = RecordStore()
    store.insert("a", "1")
    assert store.get("zzz") is None
    assert store.record("zzz") is None


def test_duplicate_key_last_value_first_position():
    """A repeated key keeps its first index and takes the last value."""
    store = RecordStore()
    store.insert("x", "first")
    store.insert("y", "middle")
    assert store.insert("x", "last") == 0

    assert store.get("x") == (0, "last")
    assert len(store) == 2
    assert [r.key for r in store.all()] == ["x", "y"]


def test_keys_are_case_and_whitespace_sensitive():
    store = RecordStore.from_lines(["Key=1", "key=2", " key=3"])
    assert store.keys() == ["Key", "key", " key"]
    assert store.get("key") == (1, "2")
    assert store.get(" key") == (2, "3")


# ---- from_lines -----------------------------------------------------------


def test_from_lines_preserves_first_seen_order():
    store = RecordStore.from_lines(SAMPLE)
    assert store.all() == [
        Record(0, "user", "alice"),
        Record(1, "role", "admin"),
        Record(2, "id", "42"),
    ]


def test_from_lines_skips_malformed_without_index_gap():
    lines = ["first=1\n", "\n", "=novalue\n", "   \n", "second=2\n"]
    store = RecordStore.from_lines(lines)
    assert [(r.index, r.key) for r in store.all()] == [(0, "first"), (1, "second")]
    assert "=novalue" not in store
    assert "" not in store


def test_from_lines_counts_lines_read():
    store = RecordStore.from_lines(["a=1\n", "junk\n", "\n"])
    assert store.lines_read == 3
    assert len(store) == 1


def test_from_lines_value_keeps_extra_delimiters():
    store = RecordStore.from_lines(["path=/usr/bin=/usr/local/bin\n"])
    assert store.get("path") == (0, "/usr/bin=/usr/local/bin")


def test_from_lines_with_custom_classifier():
    store = RecordStore.from_lines(["a:1", "b=2"], LineClassifier(":"))
    assert store.keys() == ["a"]


def test_from_lines_empty_input():
    store = RecordStore.from_lines([])
    assert len(store) == 0
    assert store.all() == []


def test_round_trip_through_input_form():
    lines = ["a=1\n", "junk\n", "b=x=y\n", "a=2\n", " c=\n"]
    first = RecordStore.from_lines(lines)
    second = RecordStore.from_lines(r.to_line() + "\n" for r in first.all())
    assert second.all() == first.all()


# ---- sealing --------------------------------------------------------------


def test_from_lines_seals_store():
    store = RecordStore.from_lines(SAMPLE)
    assert store.sealed is True
    with pytest.raises(StoreSealedError):
        store.insert("late", "value")


def test_new_store_is_open():
    store = RecordStore()
    assert store.sealed is False
    store.seal()
    with pytest.raises(StoreSealedError):
        store.insert("a", "1")


# ---- container protocol ---------------------------------------------------


def test_iteration_and_membership():
    store = RecordStore.from_lines(SAMPLE)
    assert [r.key for r in store] == ["user", "role", "id"]
    assert "role" in store
    assert "missing" not in store
    assert len(store) == 3
