"""Bernoulli admission sampler.

Throttles how many inserted rows reach the sketches: each call to
should_sample() is an independent trial that succeeds with probability
``rate``. Pass a seed to make the sequence of decisions reproducible;
with seed=None the generator is seeded from system entropy.
"""
from __future__ import annotations

import math
import random

from cardest_lite.domain.errors import InvalidRate


class AdmissionSampler:
    """Fixed-rate Bernoulli sampler.

    Parameters:
        rate: Probability in [0, 1] that a trial admits.
        seed: Optional seed for the private random.Random instance.
    """

    __slots__ = ("_rate", "_rng", "_draws", "_admitted")

    def __init__(self, rate: float, seed: int | None = None) -> None:
        if math.isnan(rate) or not (0.0 <= rate <= 1.0):
            raise InvalidRate(f"rate must be in [0, 1], got {rate}")
        self._rate = rate
        self._rng = random.Random(seed)
        self._draws = 0
        self._admitted = 0

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def draws(self) -> int:
        """Number of trials run so far."""
        return self._draws

    @property
    def admitted(self) -> int:
        """Number of trials that admitted."""
        return self._admitted

    def should_sample(self) -> bool:
        """Run one trial. random() is in [0, 1), so rate 1.0 always admits."""
        self._draws += 1
        if self._rng.random() < self._rate:
            self._admitted += 1
            return True
        return False
