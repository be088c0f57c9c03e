"""Tests for the in-memory row store."""
from __future__ import annotations

import pytest

from cardest_lite.domain.predicate import EqualityPredicate
from cardest_lite.store.base import RowStoreBase
from cardest_lite.store.memory_store import InMemoryRowStore


class TestInMemoryRowStore:
    def test_implements_interface(self):
        assert isinstance(InMemoryRowStore(), RowStoreBase)

    def test_sequential_ids(self):
        store = InMemoryRowStore()
        assert [store.insert((i, i)) for i in range(3)] == [0, 1, 2]
        assert store.count() == 3

    def test_initial_rows(self):
        store = InMemoryRowStore([(1, 2), (3, 4)])
        assert store.count() == 2
        assert store.get(1) == (3, 4)

    def test_values_copied_to_tuple(self):
        store = InMemoryRowStore()
        row = [5, 6]
        tid = store.insert(row)
        row[0] = 99
        assert store.get(tid) == (5, 6)

    def test_delete_returns_values(self):
        store = InMemoryRowStore()
        tid = store.insert((8, 9))
        assert store.delete(tid) == (8, 9)
        assert store.get(tid) is None
        assert store.count() == 0

    def test_delete_unknown(self):
        store = InMemoryRowStore()
        with pytest.raises(KeyError):
            store.delete(12)

    def test_ids_not_reused(self):
        store = InMemoryRowStore()
        first = store.insert((1, 1))
        store.delete(first)
        assert store.insert((1, 1)) != first

    def test_scan_and_ids(self):
        store = InMemoryRowStore([(1, 1), (2, 2), (3, 3)])
        store.delete(1)
        assert list(store.scan()) == [(0, (1, 1)), (2, (3, 3))]
        assert store.tuple_ids() == [0, 2]

    def test_exact_count(self):
        store = InMemoryRowStore([(1, 10), (1, 20), (2, 10), (1, 10)])
        assert store.exact_count([(0, 1)]) == 3
        assert store.exact_count([(1, 10)]) == 3
        assert store.exact_count([(0, 1), (1, 10)]) == 2
        assert store.exact_count([EqualityPredicate(0, 2), EqualityPredicate(1, 20)]) == 0
        assert store.exact_count([(0, 1), (0, 2)]) == 0

    def test_exact_count_no_predicates_counts_all(self):
        store = InMemoryRowStore([(1, 1), (2, 2)])
        assert store.exact_count([]) == 2

    def test_memory_usage_grows(self):
        store = InMemoryRowStore()
        empty = store.memory_usage_bytes()
        for i in range(100):
            store.insert((i, i))
        assert store.memory_usage_bytes() > empty
