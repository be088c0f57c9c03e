"""Domain model for cardest-lite.

Re-exports the public types for convenient access:
    from cardest_lite.domain import EqualityPredicate, MalformedTuple
"""
from cardest_lite.domain.errors import (
    EmptyQuery,
    EstimationError,
    InvalidDimension,
    InvalidRate,
    MalformedTuple,
    UntrackedColumn,
)
from cardest_lite.domain.predicate import (
    EqualityPredicate,
    PredicateLike,
    predicates_from_pairs,
)
from cardest_lite.domain.types import ColumnIndex, Row, TupleId, Value

__all__ = [
    "EmptyQuery",
    "EstimationError",
    "InvalidDimension",
    "InvalidRate",
    "MalformedTuple",
    "UntrackedColumn",
    "EqualityPredicate",
    "PredicateLike",
    "predicates_from_pairs",
    "ColumnIndex",
    "Row",
    "TupleId",
    "Value",
]
