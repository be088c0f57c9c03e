"""cardest-lite: approximate cardinality estimation for equality predicates."""

__version__ = "0.1.0"
