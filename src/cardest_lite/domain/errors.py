"""Error kinds raised by the estimator.

All of them are local validation failures: they are raised before any
state is touched, so a failed call leaves sketches and side tables as
they were. Each also subclasses ValueError, which is what callers of the
sketch used to catch.
"""
from __future__ import annotations


class EstimationError(Exception):
    """Base class for estimator errors."""


class InvalidDimension(EstimationError, ValueError):
    """Raised when a sketch is sized with a non-positive width or depth."""


class InvalidRate(EstimationError, ValueError):
    """Raised when a sampling rate falls outside [0, 1]."""


class MalformedTuple(EstimationError, ValueError):
    """Raised when a tuple is too short to hold every tracked column."""


class EmptyQuery(EstimationError, ValueError):
    """Raised when a query carries no predicates."""


class UntrackedColumn(EstimationError, ValueError):
    """Raised when a predicate names a column that has no sketch."""
