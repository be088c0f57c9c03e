"""Tests for EngineConfig validation and sizing."""
from __future__ import annotations

import math

import pytest

from cardest_lite.analytics.config import DeletePolicy, EngineConfig
from cardest_lite.analytics.hashing import UniversalHash
from cardest_lite.domain.errors import InvalidDimension, InvalidRate


class TestConfigDefaults:
    def test_defaults(self):
        config = EngineConfig()
        assert config.depth == 5
        assert config.sampling_rate == 0.1
        assert config.width_ratio == 0.01
        assert config.tracked_columns == (0, 1)
        assert config.hasher == UniversalHash()
        assert config.delete_policy is DeletePolicy.UNCONDITIONAL
        assert config.seed is None

    def test_min_tuple_length(self):
        assert EngineConfig().min_tuple_length == 2
        assert EngineConfig(tracked_columns=(4, 1)).min_tuple_length == 5

    def test_columns_coerced_to_tuple(self):
        config = EngineConfig(tracked_columns=[0, 3])
        assert config.tracked_columns == (0, 3)


class TestConfigValidation:
    @pytest.mark.parametrize("depth", [0, -1])
    def test_bad_depth(self, depth):
        with pytest.raises(InvalidDimension):
            EngineConfig(depth=depth)

    @pytest.mark.parametrize("rate", [-0.5, 1.5, math.nan])
    def test_bad_rate(self, rate):
        with pytest.raises(InvalidRate):
            EngineConfig(sampling_rate=rate)

    @pytest.mark.parametrize("ratio", [0, -0.01, math.nan])
    def test_bad_width_ratio(self, ratio):
        with pytest.raises(ValueError):
            EngineConfig(width_ratio=ratio)

    @pytest.mark.parametrize("columns", [(), (0, 0), (-1, 2)])
    def test_bad_columns(self, columns):
        with pytest.raises(ValueError):
            EngineConfig(tracked_columns=columns)


class TestSketchWidth:
    @pytest.mark.parametrize(
        "rows,width",
        [(1000, 10), (700, 7), (1, 1), (100, 1), (101, 2), (0, 0)],
    )
    def test_default_ratio(self, rows, width):
        assert EngineConfig().sketch_width(rows) == width

    def test_custom_ratio(self):
        assert EngineConfig(width_ratio=0.5).sketch_width(7) == 4
        assert EngineConfig(width_ratio=2).sketch_width(7) == 14
