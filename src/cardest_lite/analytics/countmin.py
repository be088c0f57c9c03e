"""Count-Min frequency sketch with saturating removal.

Answers the question: "How many admitted rows carry value v in this
column?" using a fixed width x depth table of counters, no matter how
many distinct values pass through it.

Each row of the table has its own hash. To add a value, hash it with
each row's hash and bump the counter in that bucket. To estimate, hash
with each row again and return the smallest counter. Any single row may
be inflated by collisions; the minimum across rows is inflated least.

Removal walks the same buckets and decrements, but never below zero.
Removing a value that was never added (or more often than it was added)
leaves the affected buckets at zero instead of raising. Once removals
are mixed with sampled admission the estimate is no longer an upper
bound on the true count.

References:
    Cormode & Muthukrishnan, "An Improved Data Stream Summary:
    The Count-Min Sketch and its Applications", 2005.
"""

from __future__ import annotations

import array
import math

from cardest_lite.analytics.hashing import RowHash, UniversalHash
from cardest_lite.domain.errors import InvalidDimension
from cardest_lite.domain.types import Value


class FrequencySketch:
    """Count-Min Sketch over integer values.

    Parameters:
        width: Number of counters per row.
        depth: Number of rows / hash functions.
        hasher: Row hash ``(value, row) -> int``; reduced modulo width.
            Defaults to UniversalHash().

    Memory: width * depth * 4 bytes (uint32 counters).
    """

    def __init__(self, width: int, depth: int, hasher: RowHash | None = None) -> None:
        if width <= 0 or depth <= 0:
            raise InvalidDimension(
                f"width and depth must be positive, got {width}, {depth}"
            )
        self._width = width
        self._depth = depth
        self._hasher: RowHash = hasher if hasher is not None else UniversalHash()
        self._total = 0
        self._tables: list[array.array] = [
            array.array("I", [0]) * width for _ in range(depth)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def hasher(self) -> RowHash:
        return self._hasher

    @property
    def total(self) -> int:
        """Net number of increments (adds minus removes, floored at 0)."""
        return self._total

    def _buckets(self, value: Value) -> list[int]:
        return [self._hasher(value, i) % self._width for i in range(self._depth)]

    def _check_count(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

    def add(self, value: Value, count: int = 1) -> None:
        """Increment the count for a value. count=0 is a no-op."""
        self._check_count(count)
        for row, idx in enumerate(self._buckets(value)):
            self._tables[row][idx] += count
        self._total += count

    def remove(self, value: Value, count: int = 1) -> None:
        """Decrement the count for a value, clamping every counter at 0."""
        self._check_count(count)
        for row, idx in enumerate(self._buckets(value)):
            table = self._tables[row]
            current = table[idx]
            table[idx] = current - count if current > count else 0
        self._total = self._total - count if self._total > count else 0

    def estimate(self, value: Value) -> int:
        """Estimate the count for a value.

        Returns the minimum counter value across all rows.
        """
        buckets = self._buckets(value)
        result = self._tables[0][buckets[0]]
        for row in range(1, self._depth):
            val = self._tables[row][buckets[row]]
            if val < result:
                result = val
        return result

    def reset(self) -> None:
        """Zero every counter, keeping width, depth and hasher."""
        for table in self._tables:
            for i in range(self._width):
                table[i] = 0
        self._total = 0

    def snapshot(self) -> list[list[int]]:
        """Copy of the counter table, one list per row."""
        return [table.tolist() for table in self._tables]

    def memory_bytes(self) -> int:
        """Approximate memory used by the counter tables."""
        return self._width * self._depth * 4  # 4 bytes per uint32

    def epsilon(self) -> float:
        """Error bound: overestimate <= epsilon * total with prob >= 1-delta."""
        return math.e / self._width

    def delta(self) -> float:
        """Failure probability: P(overestimate > epsilon * total) <= delta."""
        return math.e ** (-self._depth)
