"""Abstract base for row stores.

The estimator never reads rows back: it only needs a row count to size
its sketches. The store is the collaborator that actually holds tuples,
hands out tuple ids, and can answer a query exactly by scanning, which
is what the profiling harness compares estimates against.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from cardest_lite.domain.predicate import EqualityPredicate, PredicateLike
from cardest_lite.domain.types import Row, TupleId


class RowStoreBase(ABC):
    """Interface that row stores implement."""

    @abstractmethod
    def insert(self, values: Row) -> TupleId:
        """Store a tuple and return its id."""
        ...

    @abstractmethod
    def delete(self, tuple_id: TupleId) -> tuple[int, ...]:
        """Remove a tuple and return its values. KeyError if unknown."""
        ...

    @abstractmethod
    def get(self, tuple_id: TupleId) -> tuple[int, ...] | None:
        """Return a tuple's values, or None if the id is unknown."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of live tuples."""
        ...

    @abstractmethod
    def scan(self) -> Iterator[tuple[TupleId, tuple[int, ...]]]:
        """Yield (tuple_id, values) for every live tuple."""
        ...

    def exact_count(self, predicates: Iterable[PredicateLike]) -> int:
        """Count live tuples matching every predicate, by full scan."""
        preds = [EqualityPredicate.coerce(p) for p in predicates]
        return sum(
            1 for _, row in self.scan()
            if all(p.matches(row) for p in preds)
        )
