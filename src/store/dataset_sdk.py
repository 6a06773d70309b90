"""Python SDK for dataset operations.

This module exposes high-level APIs for ingest, fetch, listing, and
login checks backed by a dataset store.
"""

from __future__ import annotations

from pathlib import Path

from auth.credentials import CredentialList
from core.config import FluConfig
from core.errors import FluNotFoundError, FluStoreError
from core.logging_config import get_logger
from core.types import FetchResult, IngestResult
from ingest.pipeline import ingest_upload
from store.dataset_store import DatasetStore, DirectoryDatasetStore

_LOGGER = get_logger(__name__)


def fetch_dataset(
    store: DatasetStore,
    dataset_name: str | None,
    default_dataset: str,
) -> FetchResult:
    """Read one dataset by name.

    Args:
        store: Source dataset store.
        dataset_name: Requested name; empty or ``None`` selects the default.
        default_dataset: Name used when none is requested.

    Returns:
        Records unchanged, or failure with ``NotFound``/``StorageError``.
    """
    resolved_name = dataset_name or default_dataset
    try:
        records = store.get(resolved_name)
    except FluNotFoundError as error:
        _LOGGER.info("dataset_not_found", dataset_name=resolved_name)
        return FetchResult(
            ok=False, dataset_name=resolved_name, error_kind="NotFound", message=str(error)
        )
    except FluStoreError as error:
        _LOGGER.error("dataset_read_failed", dataset_name=resolved_name, message=str(error))
        return FetchResult(
            ok=False, dataset_name=resolved_name, error_kind="StorageError", message=str(error)
        )
    return FetchResult(ok=True, dataset_name=resolved_name, records=records)


def list_datasets(store: DatasetStore) -> tuple[str, ...]:
    """List stored dataset names; callers must not rely on ordering."""
    return store.list_names()


class FluClient:
    """Primary SDK entry point."""

    def __init__(
        self,
        config: FluConfig | None = None,
        store: DatasetStore | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            store: Optional store; defaults to the directory store under
                the configured data root.
        """
        self._config = config or FluConfig.from_env()
        self._store = store if store is not None else DirectoryDatasetStore(self._config)
        self._credentials = CredentialList(self._config.users_file)

    @property
    def config(self) -> FluConfig:
        return self._config

    def ingest(self, file_name: str, content: bytes) -> IngestResult:
        """Ingest one uploaded file."""
        return ingest_upload(file_name, content, self._store)

    def ingest_file(self, path: str) -> IngestResult:
        """Ingest a local file, naming the dataset after it.

        Raises:
            FluStoreError: If the local file cannot be read.
        """
        source_path = Path(path).expanduser()
        try:
            content = source_path.read_bytes()
        except OSError as error:
            raise FluStoreError(
                f"Failed to read upload source at {source_path}: {error}. "
                "Provide an existing readable file."
            ) from error
        return self.ingest(source_path.name, content)

    def fetch(self, dataset_name: str | None = None) -> FetchResult:
        """Fetch a dataset, using the configured default when unnamed."""
        return fetch_dataset(self._store, dataset_name, self._config.default_dataset)

    def list_datasets(self) -> tuple[str, ...]:
        """List stored dataset names."""
        return list_datasets(self._store)

    def verify_login(self, username: str, password: str) -> bool:
        """Check a username/password pair against the credential list."""
        return self._credentials.verify(username, password)

    def with_data_root(self, data_root: str) -> "FluClient":
        """Clone the client with a different local data root.

        Args:
            data_root: New data root path.

        Returns:
            New SDK client backed by a directory store at that root.
        """
        resolved_root = Path(data_root).expanduser().resolve()
        return FluClient(self._config.with_data_root(resolved_root))
