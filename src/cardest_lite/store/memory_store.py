"""Dict-backed row store.

Tuple ids are handed out sequentially from 0 and never reused, so a
deleted id stays dead even if the same values are inserted again.
"""
from __future__ import annotations

import logging
import sys
from typing import Iterator

from cardest_lite.domain.types import Row, TupleId
from cardest_lite.store.base import RowStoreBase

log = logging.getLogger(__name__)


class InMemoryRowStore(RowStoreBase):
    """Keeps every live tuple in a dict keyed by tuple id."""

    __slots__ = ("_rows", "_next_id")

    def __init__(self, rows: list[Row] | None = None) -> None:
        self._rows: dict[TupleId, tuple[int, ...]] = {}
        self._next_id = 0
        for row in rows or ():
            self.insert(row)

    def insert(self, values: Row) -> TupleId:
        tuple_id = self._next_id
        self._next_id += 1
        self._rows[tuple_id] = tuple(values)
        return tuple_id

    def delete(self, tuple_id: TupleId) -> tuple[int, ...]:
        try:
            return self._rows.pop(tuple_id)
        except KeyError:
            log.debug("delete of unknown tuple id %s", tuple_id)
            raise

    def get(self, tuple_id: TupleId) -> tuple[int, ...] | None:
        return self._rows.get(tuple_id)

    def count(self) -> int:
        return len(self._rows)

    def scan(self) -> Iterator[tuple[TupleId, tuple[int, ...]]]:
        yield from self._rows.items()

    def tuple_ids(self) -> list[TupleId]:
        """Live ids in insertion order."""
        return list(self._rows)

    def memory_usage_bytes(self) -> int:
        """Rough footprint: the dict plus each stored tuple."""
        return sys.getsizeof(self._rows) + sum(
            sys.getsizeof(row) for row in self._rows.values()
        )
