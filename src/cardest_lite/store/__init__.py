"""Row-store collaborators for the estimator."""

from cardest_lite.store.base import RowStoreBase
from cardest_lite.store.memory_store import InMemoryRowStore

__all__ = ["InMemoryRowStore", "RowStoreBase"]
