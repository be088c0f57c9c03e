"""Estimation engine: per-column sketches behind one sampler.

Answers "roughly how many rows satisfy col_i == v_i AND col_j == v_j ..."
without touching the row store:

    insert: one sampler draw per tuple; if admitted, every tracked
            column's value is added to that column's sketch
    delete: every tracked column's value is removed from its sketch
            (no sampling gate, unless DeletePolicy.ADMITTED_ONLY)
    query:  each predicate is estimated against its column's sketch;
            predicates on the same column combine by minimum, and the
            answer is the minimum across columns

The result counts *sampled* rows. estimate_rows() scales it back up by
1 / sampling_rate for callers that want a row-population figure.

With the default UNCONDITIONAL delete policy the estimator is biased:
deletes always subtract while inserts only sometimes add, so churn on a
value pushes its estimate toward zero. ADMITTED_ONLY trades a side
table of admitted keys for deletes that mirror inserts.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Hashable, Iterable

from cardest_lite.analytics.config import DeletePolicy, EngineConfig
from cardest_lite.analytics.countmin import FrequencySketch
from cardest_lite.analytics.sampler import AdmissionSampler
from cardest_lite.domain.errors import EmptyQuery, MalformedTuple, UntrackedColumn
from cardest_lite.domain.predicate import EqualityPredicate, PredicateLike
from cardest_lite.domain.types import ColumnIndex, Row, TupleId

if TYPE_CHECKING:
    from cardest_lite.store.base import RowStoreBase

log = logging.getLogger(__name__)


class EstimationEngine:
    """Approximate cardinality for conjunctive equality predicates.

    Parameters:
        expected_rows: Anticipated row count; sizes every sketch to
            ceil(expected_rows * config.width_ratio) counters per row.
        row_store: Optional handle to the collaborator holding the rows.
            Kept for callers; insert, delete and query never use it.
        config: EngineConfig; defaults to depth 5, rate 0.1, columns (0, 1).
    """

    def __init__(
        self,
        expected_rows: int,
        row_store: RowStoreBase | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self._config = config or EngineConfig()
        self._expected_rows = expected_rows
        self._width = self._config.sketch_width(expected_rows)
        self._depth = self._config.depth
        self._row_store = row_store
        self._sampler = AdmissionSampler(self._config.sampling_rate, seed=self._config.seed)
        self._sketches: dict[ColumnIndex, FrequencySketch] = {}
        self._admitted: Counter[Hashable] = Counter()
        self._inserts_seen = 0
        self._inserts_admitted = 0
        self._deletes_applied = 0
        self.prepare()
        log.debug(
            "engine ready: expected_rows=%d width=%d depth=%d columns=%s rate=%s",
            expected_rows, self._width, self._depth,
            self._config.tracked_columns, self._config.sampling_rate,
        )

    @classmethod
    def from_row_store(
        cls,
        store: RowStoreBase,
        config: EngineConfig | None = None,
    ) -> EstimationEngine:
        """Size the engine from the store's current row count (at least 1)."""
        return cls(max(store.count(), 1), row_store=store, config=config)

    # -- lifecycle ---------------------------------------------------------

    def prepare(self) -> None:
        """Zero every sketch, keeping the current dimensions.

        Also forgets which inserts were admitted, so deletes of rows
        inserted before prepare() are ignored under ADMITTED_ONLY.
        """
        if self._sketches:
            for sketch in self._sketches.values():
                sketch.reset()
        else:
            self._sketches = {
                column: FrequencySketch(self._width, self._depth, self._config.hasher)
                for column in self._config.tracked_columns
            }
        self._admitted.clear()
        log.debug("sketches reset (%d columns)", len(self._sketches))

    # -- updates -----------------------------------------------------------

    def _check_tuple(self, values: Row) -> None:
        need = self._config.min_tuple_length
        if len(values) < need:
            raise MalformedTuple(
                f"tuple must contain at least {need} values, got {len(values)}"
            )

    def _admission_key(self, values: Row, tuple_id: TupleId | None) -> Hashable:
        if tuple_id is not None:
            return tuple_id
        return tuple(values[c] for c in self._config.tracked_columns)

    def insert_tuple(self, values: Row, tuple_id: TupleId | None = None) -> bool:
        """Offer a newly inserted row to the sketches.

        One sampling decision covers every tracked column. Returns True
        if the row was admitted.
        """
        self._check_tuple(values)
        self._inserts_seen += 1
        if not self._sampler.should_sample():
            return False
        for column, sketch in self._sketches.items():
            sketch.add(values[column])
        if self._config.delete_policy is DeletePolicy.ADMITTED_ONLY:
            self._admitted[self._admission_key(values, tuple_id)] += 1
        self._inserts_admitted += 1
        return True

    def delete_tuple(self, values: Row, tuple_id: TupleId | None = None) -> bool:
        """Retract a deleted row from the sketches.

        Under UNCONDITIONAL every call decrements (saturating at zero) and
        tuple_id is unused. Under ADMITTED_ONLY the call decrements only
        when a matching admitted insert is on record, keyed by tuple_id if
        given, otherwise by the tracked values. Pass tuple_id to both
        insert_tuple() and delete_tuple() or to neither: an insert keyed by
        values and a delete keyed by id never match, and the delete is
        ignored. Returns True if the sketches changed.
        """
        self._check_tuple(values)
        if self._config.delete_policy is DeletePolicy.ADMITTED_ONLY:
            key = self._admission_key(values, tuple_id)
            if self._admitted[key] <= 0:
                log.debug("ignoring delete of unsampled tuple %r", key)
                return False
            self._admitted[key] -= 1
            if not self._admitted[key]:
                del self._admitted[key]
        for column, sketch in self._sketches.items():
            sketch.remove(values[column])
        self._deletes_applied += 1
        return True

    # -- queries -----------------------------------------------------------

    def query(self, predicates: Iterable[PredicateLike]) -> int:
        """Estimate how many sampled rows satisfy every predicate.

        Predicates on the same column tighten that column's estimate by
        minimum; a conjunction across columns is bounded by its most
        selective column.
        """
        per_column: dict[ColumnIndex, int] = {}
        for item in predicates:
            pred = EqualityPredicate.coerce(item)
            sketch = self._sketches.get(pred.column)
            if sketch is None:
                raise UntrackedColumn(
                    f"column {pred.column} is not tracked "
                    f"(tracked: {self._config.tracked_columns})"
                )
            est = sketch.estimate(pred.value)
            prev = per_column.get(pred.column)
            if prev is None or est < prev:
                per_column[pred.column] = est
        if not per_column:
            raise EmptyQuery("query needs at least one predicate")
        return min(per_column.values())

    def estimate_rows(self, predicates: Iterable[PredicateLike]) -> float:
        """query() scaled by 1 / the sampler's rate. 0.0 when the rate is 0."""
        sampled = self.query(predicates)
        rate = self._sampler.rate
        if rate <= 0.0:
            return 0.0
        return sampled / rate

    # -- introspection -----------------------------------------------------

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def expected_rows(self) -> int:
        return self._expected_rows

    @property
    def width(self) -> int:
        return self._width

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def tracked_columns(self) -> tuple[ColumnIndex, ...]:
        return self._config.tracked_columns

    @property
    def row_store(self) -> RowStoreBase | None:
        return self._row_store

    @property
    def sampler(self) -> AdmissionSampler:
        return self._sampler

    @property
    def inserts_seen(self) -> int:
        return self._inserts_seen

    @property
    def inserts_admitted(self) -> int:
        return self._inserts_admitted

    @property
    def deletes_applied(self) -> int:
        return self._deletes_applied

    def sketch(self, column: ColumnIndex) -> FrequencySketch:
        """The sketch for a tracked column. UntrackedColumn otherwise."""
        try:
            return self._sketches[column]
        except KeyError:
            raise UntrackedColumn(f"column {column} is not tracked") from None

    def memory_report(self) -> dict[str, int]:
        """Report approximate memory usage of the sketches."""
        sketch_bytes = sum(s.memory_bytes() for s in self._sketches.values())
        return {
            "columns": len(self._sketches),
            "sketch_bytes": sketch_bytes,
            "admitted_keys": len(self._admitted),
        }
