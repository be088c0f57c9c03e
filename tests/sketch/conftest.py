"""Shared fixtures for sketch, hash and sampler tests."""
from __future__ import annotations

import pytest


@pytest.fixture()
def identity_hash():
    """Row hash that maps value v to bucket v % width in every row.

    Distinct values below the sketch width never collide with it.
    """
    return lambda value, row: value


@pytest.fixture()
def constant_hash():
    """Row hash that sends every value to bucket 0: everything collides."""
    return lambda value, row: 0
