"""Tests for the default row hash."""
from __future__ import annotations

import dataclasses

import pytest

from cardest_lite.analytics.hashing import (
    DEFAULT_A,
    DEFAULT_B,
    DEFAULT_PRIME,
    UniversalHash,
)


class TestUniversalHash:
    def test_defaults(self):
        h = UniversalHash()
        assert (h.a, h.b, h.prime) == (31, 17, 15_485_863)
        assert (DEFAULT_A, DEFAULT_B, DEFAULT_PRIME) == (h.a, h.b, h.prime)

    def test_formula(self):
        h = UniversalHash()
        assert h(5, 0) == 155
        assert h(5, 2) == 155 + 34
        assert h(1_000_000, 1) == (31_000_000 + 17) % 15_485_863

    def test_negative_values_stay_in_range(self):
        h = UniversalHash()
        for value in (-1, -12345, -(10 ** 12)):
            for row in range(5):
                assert 0 <= h(value, row) < h.prime

    def test_rows_differ(self):
        h = UniversalHash()
        assert len({h(42, row) for row in range(5)}) == 5

    @pytest.mark.parametrize("prime", [0, 1, -7])
    def test_invalid_prime(self, prime):
        with pytest.raises(ValueError):
            UniversalHash(prime=prime)

    def test_frozen(self):
        h = UniversalHash()
        with pytest.raises(dataclasses.FrozenInstanceError):
            h.a = 3  # type: ignore[misc]

    def test_equal_configs_compare_equal(self):
        assert UniversalHash(3, 5, 101) == UniversalHash(a=3, b=5, prime=101)
