"""Shared fixtures for engine tests."""
from __future__ import annotations

import pytest

from cardest_lite.analytics.config import DeletePolicy, EngineConfig


def _identity(value: int, row: int) -> int:
    return value


@pytest.fixture()
def full_config() -> EngineConfig:
    """Every insert admitted, default hash."""
    return EngineConfig(sampling_rate=1.0, seed=7)


@pytest.fixture()
def exact_config() -> EngineConfig:
    """Every insert admitted, and values below the width never collide."""
    return EngineConfig(sampling_rate=1.0, hasher=_identity, seed=7)


@pytest.fixture()
def admitted_only_config() -> EngineConfig:
    return EngineConfig(
        sampling_rate=1.0,
        hasher=_identity,
        delete_policy=DeletePolicy.ADMITTED_ONLY,
        seed=7,
    )
