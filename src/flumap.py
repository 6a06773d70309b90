"""Public SDK surface for Flumap.

This module provides a stable import path for SDK users.
It re-exports the primary client and typed models.
"""

from __future__ import annotations

from core.config import FluConfig
from core.types import CanonicalRecord, FetchResult, IngestResult
from ingest.pipeline import ingest_upload
from store.dataset_sdk import FluClient, fetch_dataset, list_datasets
from store.dataset_store import DatasetStore, DirectoryDatasetStore
from store.memory_store import InMemoryDatasetStore

__all__ = [
    "CanonicalRecord",
    "DatasetStore",
    "DirectoryDatasetStore",
    "FetchResult",
    "FluClient",
    "FluConfig",
    "InMemoryDatasetStore",
    "IngestResult",
    "fetch_dataset",
    "ingest_upload",
    "list_datasets",
]
