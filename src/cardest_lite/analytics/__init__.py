"""Probabilistic cardinality estimation.

Public API:
    FrequencySketch: Count-Min counters with saturating removal
    UniversalHash: default (a*x + b*row) mod P row hash
    AdmissionSampler: seeded Bernoulli admission
    EngineConfig / DeletePolicy: tunables for the engine
    EstimationEngine: per-column sketches answering equality queries
"""

from cardest_lite.analytics.config import DeletePolicy, EngineConfig
from cardest_lite.analytics.countmin import FrequencySketch
from cardest_lite.analytics.engine import EstimationEngine
from cardest_lite.analytics.hashing import RowHash, UniversalHash
from cardest_lite.analytics.sampler import AdmissionSampler

__all__ = [
    "AdmissionSampler",
    "DeletePolicy",
    "EngineConfig",
    "EstimationEngine",
    "FrequencySketch",
    "RowHash",
    "UniversalHash",
]
