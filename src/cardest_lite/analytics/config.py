"""Engine configuration.

Every design constant of the estimator lives here instead of inside the
classes that use it: sketch depth, the width-per-expected-row ratio, the
sampling rate, the row hash constants, which columns are tracked, and
how deletes interact with sampling.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from fractions import Fraction

from cardest_lite.analytics.hashing import RowHash, UniversalHash
from cardest_lite.domain.errors import InvalidDimension, InvalidRate
from cardest_lite.domain.types import ColumnIndex


class DeletePolicy(Enum):
    """How delete_tuple() treats rows whose insert may not have been sampled.

    UNCONDITIONAL: every delete decrements the sketches. Inserts are only
        sometimes counted, so under rate < 1 repeated insert/delete churn
        drags estimates below the sampled truth.
    ADMITTED_ONLY: a delete decrements only if the matching insert was
        admitted. Costs a side table of admitted keys.
    """
    UNCONDITIONAL = auto()
    ADMITTED_ONLY = auto()


@dataclass(slots=True)
class EngineConfig:
    """Tunable parameters for EstimationEngine."""
    depth: int = 5
    sampling_rate: float = 0.1
    width_ratio: float = 0.01       # sketch width per expected row
    tracked_columns: tuple[ColumnIndex, ...] = (0, 1)
    hasher: RowHash = field(default_factory=UniversalHash)
    delete_policy: DeletePolicy = DeletePolicy.UNCONDITIONAL
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.depth <= 0:
            raise InvalidDimension(f"depth must be positive, got {self.depth}")
        if math.isnan(self.sampling_rate) or not (0.0 <= self.sampling_rate <= 1.0):
            raise InvalidRate(f"sampling_rate must be in [0, 1], got {self.sampling_rate}")
        if not self.width_ratio > 0:
            raise ValueError(f"width_ratio must be positive, got {self.width_ratio}")
        self.tracked_columns = tuple(self.tracked_columns)
        if not self.tracked_columns:
            raise ValueError("tracked_columns must not be empty")
        if len(set(self.tracked_columns)) != len(self.tracked_columns):
            raise ValueError(f"tracked_columns has duplicates: {self.tracked_columns}")
        if min(self.tracked_columns) < 0:
            raise ValueError(f"tracked_columns must be non-negative: {self.tracked_columns}")

    @property
    def min_tuple_length(self) -> int:
        """Shortest tuple that holds every tracked column."""
        return max(self.tracked_columns) + 1

    def sketch_width(self, expected_rows: int) -> int:
        """ceil(expected_rows * width_ratio), in exact decimal arithmetic.

        Plain float math turns 700 * 0.01 into 7.000000000000001 and
        rounds the width up to 8.
        """
        return math.ceil(expected_rows * Fraction(str(self.width_ratio)))
