"""Workload generation and accuracy profiling for cardest-lite."""

from cardest_lite.profiling.harness import WorkloadResult, q_error, run_workload
from cardest_lite.profiling.load_generator import OpKind, WorkloadGenerator, WorkloadOp
from cardest_lite.profiling.report import format_comparison, format_report

__all__ = [
    "OpKind",
    "WorkloadGenerator",
    "WorkloadOp",
    "WorkloadResult",
    "format_comparison",
    "format_report",
    "q_error",
    "run_workload",
]
