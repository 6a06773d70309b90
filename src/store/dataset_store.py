"""Dataset store contract and directory backend.

This module persists named datasets as one JSON file each under a flat
directory. Writes go to a temporary file that replaces the target in one
rename, so readers see either the old or the new dataset.
"""

from __future__ import annotations

import os
from pathlib import Path
import tempfile
import threading
from typing import Protocol, Sequence
import weakref

from core.config import FluConfig
from core.constants import DATASET_FILE_SUFFIX, DATASETS_DIR_NAME, TEMP_FILE_PREFIX
from core.errors import FluDecodeError, FluNotFoundError, FluStoreError
from core.logging_config import get_logger
from core.types import CanonicalRecord
from store.record_payload import records_from_json_bytes, records_to_json_text

_LOGGER = get_logger(__name__)
_WRITE_LOCKS: weakref.WeakValueDictionary[Path, threading.Lock] = weakref.WeakValueDictionary()
_WRITE_LOCKS_GUARD = threading.Lock()


class DatasetStore(Protocol):
    """Key-value contract mapping dataset names to record sequences."""

    def put(self, name: str, records: Sequence[CanonicalRecord]) -> None: ...

    def get(self, name: str) -> tuple[CanonicalRecord, ...]: ...

    def list_names(self) -> tuple[str, ...]: ...


def validate_dataset_name(name: str) -> str:
    """Check that a dataset name is safe to use as a flat storage key.

    Args:
        name: Candidate dataset name.

    Returns:
        The unchanged name.

    Raises:
        FluStoreError: If the name is empty, hidden, or contains separators.
    """
    if not name or name in {".", ".."} or name.startswith("."):
        raise FluStoreError(
            f"Invalid dataset name '{name}': names must be non-empty and must not "
            "start with a dot. Rename the upload and retry."
        )
    if any(character in name for character in ("/", "\\", "\x00")):
        raise FluStoreError(
            f"Invalid dataset name '{name}': path separators are not allowed."
        )
    return name


class DirectoryDatasetStore:
    """Filesystem-backed store with one ``<name>.json`` file per dataset."""

    def __init__(self, config: FluConfig) -> None:
        """Initialize the store under the configured data root.

        Args:
            config: Runtime configuration.
        """
        self._datasets_root = config.data_root / DATASETS_DIR_NAME
        self._datasets_root.mkdir(parents=True, exist_ok=True)

    @property
    def datasets_root(self) -> Path:
        return self._datasets_root

    def put(self, name: str, records: Sequence[CanonicalRecord]) -> None:
        """Persist records under a name, replacing any previous dataset.

        Args:
            name: Dataset name.
            records: Records in dataset order.

        Raises:
            FluStoreError: If the name is invalid or the write fails.
        """
        target_path = self._dataset_path(name)
        try:
            payload = records_to_json_text(records)
        except ValueError as error:
            raise FluStoreError(
                f"Failed to serialize dataset '{name}': {error}."
            ) from error
        with _write_lock(target_path):
            _replace_file(target_path, payload)
        _LOGGER.info("dataset_written", dataset_name=name, record_count=len(records))

    def get(self, name: str) -> tuple[CanonicalRecord, ...]:
        """Load all records stored under a name.

        Args:
            name: Dataset name.

        Returns:
            Records in stored order.

        Raises:
            FluNotFoundError: If no dataset of that name exists, including
                names that could never have been stored.
            FluStoreError: If the file cannot be read or parsed.
        """
        try:
            dataset_path = self._dataset_path(name)
        except FluStoreError as error:
            raise FluNotFoundError(f"Dataset '{name}' not found.") from error
        try:
            content = dataset_path.read_bytes()
        except FileNotFoundError as error:
            raise FluNotFoundError(
                f"Dataset '{name}' not found. Upload a file named '{name}.csv' "
                f"or '{name}.json' first."
            ) from error
        except OSError as error:
            raise FluStoreError(f"Failed to read dataset file {dataset_path}: {error}.") from error
        try:
            return tuple(records_from_json_bytes(content))
        except FluDecodeError as error:
            raise FluStoreError(
                f"Stored dataset at {dataset_path} is corrupt: {error}. "
                "Re-upload the source file to rebuild it."
            ) from error

    def list_names(self) -> tuple[str, ...]:
        """List stored dataset names in sorted order."""
        try:
            paths = list(self._datasets_root.glob(f"*{DATASET_FILE_SUFFIX}"))
        except OSError as error:
            raise FluStoreError(
                f"Failed to list datasets under {self._datasets_root}: {error}."
            ) from error
        names = [
            path.name[: -len(DATASET_FILE_SUFFIX)]
            for path in paths
            if path.is_file() and not path.name.startswith(".")
        ]
        return tuple(sorted(names))

    def _dataset_path(self, name: str) -> Path:
        return self._datasets_root / f"{validate_dataset_name(name)}{DATASET_FILE_SUFFIX}"


def _write_lock(target_path: Path) -> threading.Lock:
    """Return the process-wide write lock for one dataset file.

    Entries drop out once no writer holds the lock.
    """
    with _WRITE_LOCKS_GUARD:
        lock = _WRITE_LOCKS.get(target_path)
        if lock is None:
            lock = threading.Lock()
            _WRITE_LOCKS[target_path] = lock
        return lock


def _replace_file(target_path: Path, payload: str) -> None:
    """Write payload to a sibling temp file and rename it over the target."""
    try:
        descriptor, temp_name = tempfile.mkstemp(
            prefix=TEMP_FILE_PREFIX,
            suffix=".part",
            dir=target_path.parent,
        )
    except OSError as error:
        raise FluStoreError(
            f"Failed to create temporary file in {target_path.parent}: {error}."
        ) from error
    temp_path = Path(temp_name)
    try:
        with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, target_path)
    except OSError as error:
        temp_path.unlink(missing_ok=True)
        raise FluStoreError(f"Failed to write dataset file {target_path}: {error}.") from error
