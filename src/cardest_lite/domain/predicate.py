"""Equality predicates consumed by EstimationEngine.query()."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from cardest_lite.domain.types import ColumnIndex, Row, Value


@dataclass(frozen=True, slots=True)
class EqualityPredicate:
    """``column == value``, the only predicate kind the estimator handles."""
    column: ColumnIndex
    value: Value

    def matches(self, row: Row) -> bool:
        """True if the row holds ``value`` at ``column``."""
        return self.column < len(row) and row[self.column] == self.value

    @classmethod
    def coerce(cls, item: PredicateLike) -> EqualityPredicate:
        """Accept either a predicate or a plain (column, value) pair."""
        if isinstance(item, cls):
            return item
        column, value = item
        return cls(column=column, value=value)


PredicateLike = Union[EqualityPredicate, tuple[ColumnIndex, Value]]


def predicates_from_pairs(pairs: Iterable[tuple[ColumnIndex, Value]]) -> list[EqualityPredicate]:
    return [EqualityPredicate(column=c, value=v) for c, v in pairs]
