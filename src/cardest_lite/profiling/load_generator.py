"""Synthetic insert/delete workloads for exercising the estimator.

Workload shape:
  - num_rows inserts of two-column integer tuples; each column draws
    from num_values distinct values with a Zipf-like distribution
    (value i has weight 1/(i+1)), so a few hot values dominate
  - delete_fraction of the inserted tuples are deleted again, each
    delete placed after its insert
  - num_queries equality queries: single-column on either column, or
    a conjunction of both, biased toward hot values

Ops reference tuples by their position in insertion order rather than
by store id; the harness maps positions to ids as it replays them.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto

from cardest_lite.domain.predicate import EqualityPredicate, predicates_from_pairs


class OpKind(Enum):
    INSERT = auto()
    DELETE = auto()


@dataclass(slots=True)
class WorkloadOp:
    """One step of a workload: insert or delete of row number ``seq``."""
    kind: OpKind
    seq: int
    values: tuple[int, int]


class WorkloadGenerator:
    """Generate reproducible workloads from a seed."""

    __slots__ = (
        "_rng", "_num_rows", "_num_values", "_delete_fraction",
        "_num_queries", "_zipf_weights",
    )

    def __init__(
        self,
        num_rows: int = 10_000,
        num_values: int = 200,
        delete_fraction: float = 0.2,
        num_queries: int = 100,
        seed: int = 42,
    ) -> None:
        if num_rows < 0 or num_values < 1 or num_queries < 0:
            raise ValueError("num_rows, num_queries >= 0 and num_values >= 1 required")
        if not (0.0 <= delete_fraction <= 1.0):
            raise ValueError(f"delete_fraction must be in [0, 1], got {delete_fraction}")
        self._rng = random.Random(seed)
        self._num_rows = num_rows
        self._num_values = num_values
        self._delete_fraction = delete_fraction
        self._num_queries = num_queries
        self._zipf_weights = [1.0 / (i + 1) for i in range(num_values)]

    def _draw_value(self) -> int:
        return self._rng.choices(
            range(self._num_values), weights=self._zipf_weights, k=1
        )[0]

    def generate_ops(self) -> list[WorkloadOp]:
        """All inserts, with deletes spliced in after their inserts."""
        rows = [(self._draw_value(), self._draw_value()) for _ in range(self._num_rows)]
        ops = [WorkloadOp(OpKind.INSERT, seq, values) for seq, values in enumerate(rows)]

        n_delete = int(self._num_rows * self._delete_fraction)
        doomed = self._rng.sample(range(self._num_rows), n_delete)
        # each delete lands somewhere after its insert; walk from the back
        # so earlier splice points stay valid
        placements = sorted(
            ((self._rng.randint(seq + 1, self._num_rows), seq) for seq in doomed),
            reverse=True,
        )
        for pos, seq in placements:
            ops.insert(pos, WorkloadOp(OpKind.DELETE, seq, rows[seq]))
        return ops

    def generate_queries(self) -> list[list[EqualityPredicate]]:
        """Equality queries: column 0, column 1, or both, over hot values."""
        hot = max(1, self._num_values // 10)
        queries = []
        for _ in range(self._num_queries):
            shape = self._rng.randint(0, 2)
            a = self._rng.randrange(hot)
            b = self._rng.randrange(hot)
            if shape == 0:
                queries.append(predicates_from_pairs([(0, a)]))
            elif shape == 1:
                queries.append(predicates_from_pairs([(1, b)]))
            else:
                queries.append(predicates_from_pairs([(0, a), (1, b)]))
        return queries
