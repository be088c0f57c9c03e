"""Row hash functions for the frequency sketch.

Each sketch row needs its own hash so that two values colliding in one
row are unlikely to collide in the others. The default strategy is a
linear universal-style hash over a prime modulus:

    h_i(x) = (a * x + b * i) mod P

The sketch reduces the result modulo its width to get a bucket. Any
callable with the signature ``(value, row) -> int`` can stand in for
UniversalHash, which is how tests force (or rule out) collisions.

Note that with this family the rows differ only by the additive term
b * i. While a * x + b * i stays below P, two values collide in row i
exactly when a * x == a * y modulo the width, which does not depend on
i, so the rows share their collisions and the minimum over rows adds
little. Inject a different RowHash when that matters.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeAlias

from cardest_lite.domain.types import Value

RowHash: TypeAlias = Callable[[Value, int], int]

DEFAULT_A = 31
DEFAULT_B = 17
DEFAULT_PRIME = 15_485_863  # the millionth prime


@dataclass(frozen=True, slots=True)
class UniversalHash:
    """(a * value + b * row) mod prime."""
    a: int = DEFAULT_A
    b: int = DEFAULT_B
    prime: int = DEFAULT_PRIME

    def __post_init__(self) -> None:
        if self.prime <= 1:
            raise ValueError(f"prime must be greater than 1, got {self.prime}")

    def __call__(self, value: Value, row: int) -> int:
        # % with a positive modulus is non-negative, so negative values
        # still land in [0, prime)
        return (self.a * value + self.b * row) % self.prime
