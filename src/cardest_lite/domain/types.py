"""Shared type aliases used across the estimator."""
from __future__ import annotations

from typing import Sequence, TypeAlias

ColumnIndex: TypeAlias = int
Value: TypeAlias = int
TupleId: TypeAlias = int
Row: TypeAlias = Sequence[int]
