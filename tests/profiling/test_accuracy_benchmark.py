"""Benchmark: estimation error under churn for both delete policies.

Runs a larger workload with a 10% sampling rate and 20% deletes. The
numbers printed here show how far unconditional deletes drag estimates
below the truth compared with admitted-only deletes.
"""
from __future__ import annotations

import pytest

from cardest_lite.analytics.config import DeletePolicy
from cardest_lite.profiling.harness import run_workload
from cardest_lite.profiling.report import format_comparison


@pytest.mark.benchmark
class TestDeletePolicyAccuracy:
    def test_admitted_only_beats_unconditional_under_churn(self):
        common = dict(
            num_rows=50_000, num_values=200, delete_fraction=0.2,
            num_queries=200, sampling_rate=0.1, seed=42,
        )
        unconditional = run_workload(**common, delete_policy=DeletePolicy.UNCONDITIONAL)
        admitted_only = run_workload(**common, delete_policy=DeletePolicy.ADMITTED_ONLY)

        print()
        print(format_comparison(unconditional, admitted_only))

        assert admitted_only.underestimates < unconditional.underestimates
        assert admitted_only.median_q_error < unconditional.median_q_error

    def test_full_sampling_is_upper_bound(self):
        result = run_workload(
            num_rows=50_000, num_values=200, delete_fraction=0.0,
            num_queries=200, sampling_rate=1.0, seed=42,
        )
        assert result.underestimates == 0
