"""Upload ingestion orchestration.

This module drives one upload through detection, decoding, validation,
canonicalization, and storage, and reports the outcome as a result.
"""

from __future__ import annotations

from typing import Literal

from core.errors import FluError, FluIngestError, FluUnsupportedFormatError
from core.logging_config import get_logger
from core.types import CanonicalRecord, IngestErrorKind, IngestResult
from ingest.canonicalize import canonicalize_rows
from ingest.csv_decoder import decode_csv
from ingest.format_detection import dataset_name_from_file_name, detect_format
from ingest.validation import validate_csv_rows, validate_record_list
from store.dataset_store import DatasetStore
from store.record_payload import records_from_json_bytes

_LOGGER = get_logger(__name__)

IngestStage = Literal[
    "received",
    "detected",
    "decoded",
    "validated",
    "canonicalized",
    "stored",
    "rejected",
]
ALLOWED_STAGE_TRANSITIONS: dict[IngestStage, tuple[IngestStage, ...]] = {
    "received": ("detected", "rejected"),
    "detected": ("decoded", "rejected"),
    "decoded": ("validated", "rejected"),
    "validated": ("canonicalized", "stored", "rejected"),
    "canonicalized": ("stored", "rejected"),
    "stored": (),
    "rejected": (),
}


def validate_stage_transition(current: IngestStage, next_stage: IngestStage) -> None:
    """Validate one pipeline transition against allowed state machine edges."""
    allowed_stages = ALLOWED_STAGE_TRANSITIONS[current]
    if next_stage not in allowed_stages:
        raise FluIngestError(
            f"Invalid ingest stage transition {current!r} -> {next_stage!r}. "
            f"Allowed: {', '.join(allowed_stages) or 'none'}."
        )


class IngestPipelineRunner:
    """Stateful runner for one upload."""

    def __init__(self, file_name: str, content: bytes, store: DatasetStore) -> None:
        self._file_name = file_name
        self._content = content
        self._store = store
        self._dataset_name: str | None = None
        self._stages: list[IngestStage] = ["received"]

    @property
    def stage(self) -> IngestStage:
        return self._stages[-1]

    def run(self) -> IngestResult:
        """Execute the pipeline and return its outcome.

        Failures at any stage end in ``rejected`` with nothing persisted.
        """
        try:
            record_count = self._execute()
        except FluError as error:
            return self._reject(error)
        _LOGGER.info(
            "ingest_completed",
            file_name=self._file_name,
            dataset_name=self._dataset_name,
            record_count=record_count,
        )
        return IngestResult(
            ok=True,
            dataset_name=self._dataset_name,
            record_count=record_count,
            stages=tuple(self._stages),
        )

    def _execute(self) -> int:
        upload_format = detect_format(self._file_name)
        if upload_format == "unsupported":
            raise FluUnsupportedFormatError(
                f"Unsupported upload '{self._file_name}': only .csv and .json files "
                "are accepted."
            )
        self._dataset_name = dataset_name_from_file_name(self._file_name)
        self._advance("detected")
        if upload_format == "csv":
            records = self._ingest_csv()
        else:
            records = self._ingest_json()
        self._store.put(self._dataset_name, records)
        self._advance("stored")
        return len(records)

    def _ingest_csv(self) -> list[CanonicalRecord]:
        rows = decode_csv(self._content)
        self._advance("decoded")
        validate_csv_rows(rows)
        self._advance("validated")
        records = canonicalize_rows(rows[1:])
        self._advance("canonicalized")
        return records

    def _ingest_json(self) -> list[CanonicalRecord]:
        records = records_from_json_bytes(self._content)
        self._advance("decoded")
        validate_record_list(records)
        self._advance("validated")
        return records

    def _advance(self, next_stage: IngestStage) -> None:
        validate_stage_transition(self.stage, next_stage)
        self._stages.append(next_stage)
        _LOGGER.debug("ingest_stage", file_name=self._file_name, stage=next_stage)

    def _reject(self, error: FluError) -> IngestResult:
        failed_stage = self.stage
        self._stages.append("rejected")
        error_kind = _ingest_error_kind(error)
        _LOGGER.warning(
            "ingest_rejected",
            file_name=self._file_name,
            dataset_name=self._dataset_name,
            failed_after=failed_stage,
            error_kind=error_kind,
            message=str(error),
        )
        return IngestResult(
            ok=False,
            dataset_name=self._dataset_name,
            error_kind=error_kind,
            message=str(error),
            stages=tuple(self._stages),
        )


def ingest_upload(file_name: str, content: bytes, store: DatasetStore) -> IngestResult:
    """Ingest one uploaded file into the store.

    Args:
        file_name: Client-supplied file name; its suffix picks the format
            and its base name picks the dataset.
        content: Raw upload bytes.
        store: Destination dataset store.

    Returns:
        Success with the dataset name, or failure with an error kind.
    """
    runner = IngestPipelineRunner(file_name, content, store)
    return runner.run()


def _ingest_error_kind(error: FluError) -> IngestErrorKind:
    if isinstance(error, FluIngestError):
        return error.error_kind  # type: ignore[return-value]
    return "StorageError"
