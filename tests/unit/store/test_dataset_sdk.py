"""Unit tests for the dataset SDK client."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.errors import FluStoreError
from core.types import CanonicalRecord
from store.dataset_sdk import FluClient, fetch_dataset
from store.dataset_store import DirectoryDatasetStore
from store.memory_store import InMemoryDatasetStore
from tests.fixture_paths import fixture_bytes, fixture_path


class BrokenReadStore(InMemoryDatasetStore):
    """Memory store whose reads always fail."""

    def get(self, name: str) -> tuple[CanonicalRecord, ...]:
        raise FluStoreError("permission denied")


def test_fetch_uses_default_dataset_when_unnamed(flu_config) -> None:
    """Fetching without a name should read the configured default."""
    config = replace(flu_config, default_dataset="swiss_survey")
    client = FluClient(config, InMemoryDatasetStore())
    client.ingest("swiss_survey.csv", fixture_bytes("uploads/swiss_survey.csv"))

    result = client.fetch()

    assert result.ok and result.dataset_name == "swiss_survey" and len(result.records) == 3


def test_fetch_reports_not_found(flu_config) -> None:
    """Unknown datasets should produce a NotFound result."""
    client = FluClient(flu_config, InMemoryDatasetStore())

    result = client.fetch("never_uploaded")

    assert not result.ok and result.error_kind == "NotFound" and result.records == ()


def test_fetch_dataset_reports_storage_error() -> None:
    """Read failures should produce a StorageError result."""
    result = fetch_dataset(BrokenReadStore(), "", "fallback")

    assert (result.ok, result.error_kind, result.dataset_name) == (
        False,
        "StorageError",
        "fallback",
    )


def test_ingest_file_names_dataset_after_file(flu_config) -> None:
    """Local file ingest should derive the dataset from the file name."""
    client = FluClient(flu_config)

    result = client.ingest_file(str(fixture_path("uploads/swiss_survey.json")))

    assert result.ok and client.list_datasets() == ("swiss_survey",)


def test_with_data_root_points_at_new_directory(flu_config, tmp_path) -> None:
    """Cloned clients should not see datasets from the original root."""
    client = FluClient(flu_config)
    client.ingest("alps.csv", fixture_bytes("uploads/swiss_survey.csv"))

    other = client.with_data_root(str(tmp_path / "other"))

    assert other.list_datasets() == () and client.list_datasets() == ("alps",)


def test_verify_login_reads_configured_users_file(flu_config) -> None:
    """Login checks should consult the configured credential list."""
    config = replace(flu_config, users_file=fixture_path("login/users.csv"))
    client = FluClient(config, InMemoryDatasetStore())

    assert client.verify_login("analyst", "s3cret") and not client.verify_login("analyst", "nope")


@pytest.mark.parametrize("store_kind", ["directory", "memory"])
def test_fetch_reports_not_found_for_path_like_names(flu_config, store_kind: str) -> None:
    """Both backends should report never-ingested unsafe names as NotFound."""
    store = (
        DirectoryDatasetStore(flu_config) if store_kind == "directory" else InMemoryDatasetStore()
    )

    result = fetch_dataset(store, "../secret", "default")

    assert not result.ok and result.error_kind == "NotFound"


def test_with_data_root_moves_default_users_file(flu_config, tmp_path) -> None:
    """A credential list at its default location should follow the new root."""
    other_root = tmp_path / "other"
    credentials = other_root / "login" / "users.csv"
    credentials.parent.mkdir(parents=True)
    credentials.write_text("username,password\nanalyst,s3cret\n", encoding="utf-8")

    other = FluClient(flu_config).with_data_root(str(other_root))

    assert other.config.users_file == credentials.resolve() and other.verify_login(
        "analyst", "s3cret"
    )
