"""Workload harness: drive a row store and an engine, measure both.

Replays a generated workload against an InMemoryRowStore and an
EstimationEngine side by side (the store is the ground truth), then runs
every query and compares estimate_rows() with the exact count.

Accuracy is reported as q-error, max(est, true) / min(est, true) with
both sides floored at 1, the usual figure of merit for cardinality
estimates: 1.0 is perfect, and it punishes over- and underestimates
symmetrically.
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import statistics
import time
from dataclasses import dataclass

from cardest_lite.analytics.config import DeletePolicy, EngineConfig
from cardest_lite.analytics.engine import EstimationEngine
from cardest_lite.profiling.load_generator import OpKind, WorkloadGenerator
from cardest_lite.store.memory_store import InMemoryRowStore

log = logging.getLogger(__name__)


@dataclass(slots=True)
class WorkloadResult:
    """Timing and accuracy results from a single workload run."""
    total_ops: int
    inserts: int
    deletes: int
    queries: int
    admitted: int
    update_time_ms: float
    query_time_ms: float
    total_time_ms: float
    ops_per_sec: float
    mean_abs_error: float
    median_q_error: float
    max_q_error: float
    underestimates: int
    delete_policy: DeletePolicy
    sampling_rate: float
    sketch_width: int
    sketch_depth: int
    cprofile_stats: str | None = None


def q_error(estimate: float, actual: int) -> float:
    """max(e, a) / min(e, a) with both floored at 1."""
    e = max(estimate, 1.0)
    a = max(float(actual), 1.0)
    return e / a if e >= a else a / e


def run_workload(
    num_rows: int = 10_000,
    num_values: int = 200,
    delete_fraction: float = 0.2,
    num_queries: int = 100,
    sampling_rate: float = 0.1,
    depth: int = 5,
    delete_policy: DeletePolicy = DeletePolicy.UNCONDITIONAL,
    seed: int = 42,
    profile: bool = False,
) -> WorkloadResult:
    """Run one workload and return timing and accuracy data.

    The engine is sized for num_rows and seeded with ``seed`` so that
    two runs with the same arguments produce the same estimates.
    """
    gen = WorkloadGenerator(
        num_rows=num_rows,
        num_values=num_values,
        delete_fraction=delete_fraction,
        num_queries=num_queries,
        seed=seed,
    )
    ops = gen.generate_ops()
    queries = gen.generate_queries()

    store = InMemoryRowStore()
    config = EngineConfig(
        depth=depth,
        sampling_rate=sampling_rate,
        delete_policy=delete_policy,
        seed=seed,
    )
    engine = EstimationEngine(max(num_rows, 1), row_store=store, config=config)

    inserts = 0
    deletes = 0
    update_ms = 0.0
    query_ms = 0.0
    abs_errors: list[float] = []
    q_errors: list[float] = []
    under = 0

    def _run():
        nonlocal inserts, deletes, update_ms, query_ms, under
        ids_by_seq: dict[int, int] = {}

        t0 = time.perf_counter()
        for op in ops:
            if op.kind is OpKind.INSERT:
                tuple_id = store.insert(op.values)
                ids_by_seq[op.seq] = tuple_id
                engine.insert_tuple(op.values, tuple_id)
                inserts += 1
            else:
                tuple_id = ids_by_seq.pop(op.seq)
                values = store.delete(tuple_id)
                engine.delete_tuple(values, tuple_id)
                deletes += 1
        update_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        for preds in queries:
            est = engine.estimate_rows(preds)
            actual = store.exact_count(preds)
            abs_errors.append(abs(est - actual))
            q_errors.append(q_error(est, actual))
            if est < actual:
                under += 1
        query_ms = (time.perf_counter() - t0) * 1000

    cprofile_text = None
    t_total_start = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(30)
        cprofile_text = s.getvalue()
    else:
        _run()
    total_ms = (time.perf_counter() - t_total_start) * 1000

    total_ops = len(ops)
    ops_per_sec = total_ops / (update_ms / 1000) if update_ms > 0 else 0.0
    log.info(
        "workload done: %d ops in %.1f ms, %d queries in %.1f ms",
        total_ops, update_ms, len(queries), query_ms,
    )

    return WorkloadResult(
        total_ops=total_ops,
        inserts=inserts,
        deletes=deletes,
        queries=len(queries),
        admitted=engine.inserts_admitted,
        update_time_ms=update_ms,
        query_time_ms=query_ms,
        total_time_ms=total_ms,
        ops_per_sec=ops_per_sec,
        mean_abs_error=statistics.fmean(abs_errors) if abs_errors else 0.0,
        median_q_error=statistics.median(q_errors) if q_errors else 1.0,
        max_q_error=max(q_errors, default=1.0),
        underestimates=under,
        delete_policy=delete_policy,
        sampling_rate=sampling_rate,
        sketch_width=engine.width,
        sketch_depth=engine.depth,
        cprofile_stats=cprofile_text,
    )
