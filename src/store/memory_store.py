"""In-memory dataset store.

Same contract as the directory store, without persistence.
"""

from __future__ import annotations

import threading
from typing import Sequence

from core.errors import FluNotFoundError
from core.types import CanonicalRecord
from store.dataset_store import validate_dataset_name


class InMemoryDatasetStore:
    """Dictionary-backed dataset store."""

    def __init__(self) -> None:
        self._datasets: dict[str, tuple[CanonicalRecord, ...]] = {}
        self._lock = threading.Lock()

    def put(self, name: str, records: Sequence[CanonicalRecord]) -> None:
        snapshot = tuple(records)
        with self._lock:
            self._datasets[validate_dataset_name(name)] = snapshot

    def get(self, name: str) -> tuple[CanonicalRecord, ...]:
        with self._lock:
            records = self._datasets.get(name)
        if records is None:
            raise FluNotFoundError(f"Dataset '{name}' not found.")
        return records

    def list_names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._datasets))
