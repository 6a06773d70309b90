"""Shared typed models.

This module defines the immutable observation record and the
request/result models passed between ingest, store, and serving layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

UploadFormat = Literal["csv", "json", "unsupported"]
IngestErrorKind = Literal["UnsupportedFormat", "DecodeError", "FormatError", "StorageError"]
FetchErrorKind = Literal["NotFound", "StorageError"]


@dataclass(frozen=True)
class CanonicalRecord:
    """One geolocated bird-flu observation.

    Attributes:
        latitude: Observation latitude; zero means missing.
        longitude: Observation longitude; zero means missing.
        species: Free-text species identifier.
        h5n1: H5N1 titer, ``0.0`` when absent.
        h5n2: H5N2 titer, ``0.0`` when absent.
        h7n2: H7N2 titer, ``0.0`` when absent.
        h7n8: H7N8 titer, ``0.0`` when absent.
        timestamp: Opaque observation time string.
        provenance: Source attribution.
    """

    latitude: float
    longitude: float
    species: str
    h5n1: float = 0.0
    h5n2: float = 0.0
    h7n2: float = 0.0
    h7n8: float = 0.0
    timestamp: str = ""
    provenance: str = ""


@dataclass(frozen=True)
class IngestResult:
    """Outcome of one upload ingestion.

    Attributes:
        ok: Whether the dataset was stored.
        dataset_name: Derived dataset name, when one could be derived.
        record_count: Number of records stored.
        error_kind: Failure classification when ``ok`` is false.
        message: Human-readable failure detail.
        stages: Ordered pipeline states visited by the upload.
    """

    ok: bool
    dataset_name: str | None = None
    record_count: int = 0
    error_kind: IngestErrorKind | None = None
    message: str | None = None
    stages: tuple[str, ...] = ()


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one dataset read.

    Attributes:
        ok: Whether the dataset was found and read.
        dataset_name: Resolved dataset name.
        records: Stored records in original order.
        error_kind: Failure classification when ``ok`` is false.
        message: Human-readable failure detail.
    """

    ok: bool
    dataset_name: str
    records: tuple[CanonicalRecord, ...] = ()
    error_kind: FetchErrorKind | None = None
    message: str | None = None
