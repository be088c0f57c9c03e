"""Report generation for workload results.

Formats WorkloadResult data into human-readable tables for terminal
output.
"""
from __future__ import annotations

from cardest_lite.profiling.harness import WorkloadResult


def _policy_label(result: WorkloadResult) -> str:
    return result.delete_policy.name.lower().replace("_", "-")


def format_report(result: WorkloadResult, label: str = "Workload") -> str:
    """Format a WorkloadResult as a readable report string."""
    admit_pct = result.admitted / result.inserts * 100 if result.inserts else 0.0
    lines = [
        f"=== {label} ===",
        f"Sketch:            width {result.sketch_width:,} x depth {result.sketch_depth}",
        f"Sampling rate:     {result.sampling_rate:g}",
        f"Delete policy:     {_policy_label(result)}",
        f"",
        f"Operations:        {result.total_ops:,} "
        f"({result.inserts:,} inserts, {result.deletes:,} deletes)",
        f"Admitted:          {result.admitted:,} ({admit_pct:.1f}%)",
        f"Update time:       {result.update_time_ms:.1f} ms",
        f"Throughput:        {result.ops_per_sec:,.0f} ops/sec",
        f"",
        f"Queries:           {result.queries:,} in {result.query_time_ms:.1f} ms",
        f"  Mean abs error:  {result.mean_abs_error:,.1f} rows",
        f"  Median q-error:  {result.median_q_error:.2f}",
        f"  Max q-error:     {result.max_q_error:.2f}",
        f"  Underestimates:  {result.underestimates:,}",
    ]
    return "\n".join(lines)


def format_comparison(
    before: WorkloadResult,
    after: WorkloadResult,
) -> str:
    """Format a side-by-side table of two runs."""
    b_label = _policy_label(before)
    a_label = _policy_label(after)
    lines = [
        f"{'Metric':<24} {b_label:>16} {a_label:>16}",
        "-" * 58,
        f"{'Update time (ms)':<24} {before.update_time_ms:>16.1f} "
        f"{after.update_time_ms:>16.1f}",
        f"{'Throughput (ops/sec)':<24} {before.ops_per_sec:>16,.0f} "
        f"{after.ops_per_sec:>16,.0f}",
        f"{'Mean abs error':<24} {before.mean_abs_error:>16,.1f} "
        f"{after.mean_abs_error:>16,.1f}",
        f"{'Median q-error':<24} {before.median_q_error:>16.2f} "
        f"{after.median_q_error:>16.2f}",
        f"{'Max q-error':<24} {before.max_q_error:>16.2f} "
        f"{after.max_q_error:>16.2f}",
        f"{'Underestimates':<24} {before.underestimates:>16,} "
        f"{after.underestimates:>16,}",
    ]
    return "\n".join(lines)
