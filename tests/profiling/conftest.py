"""Shared fixtures for workload and harness tests."""
from __future__ import annotations

import pytest

from cardest_lite.profiling.load_generator import WorkloadGenerator


@pytest.fixture()
def small_generator() -> WorkloadGenerator:
    return WorkloadGenerator(
        num_rows=500, num_values=30, delete_fraction=0.3, num_queries=40, seed=42
    )
