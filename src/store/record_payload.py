"""Shared JSON serialization for CanonicalRecord payloads.

This module centralizes the record wire shape. It is reused by the
JSON upload path, dataset persistence, and the HTTP layer.
"""

from __future__ import annotations

import json
import math
from typing import Any

from core.errors import FluDecodeError
from core.types import CanonicalRecord

_FLOAT_FIELDS = (
    ("latitude", "latitude"),
    ("longitude", "longitude"),
    ("H5N1", "h5n1"),
    ("H5N2", "h5n2"),
    ("H7N2", "h7n2"),
    ("H7N8", "h7n8"),
)
_TEXT_FIELDS = (
    ("species", "species"),
    ("timestamp", "timestamp"),
    ("provenance", "provenance"),
)


def record_to_payload(record: CanonicalRecord) -> dict[str, object]:
    """Serialize CanonicalRecord into JSON-safe payload.

    Args:
        record: Observation record.

    Returns:
        Dictionary payload keyed by wire field names.
    """
    return {
        "latitude": record.latitude,
        "longitude": record.longitude,
        "species": record.species,
        "H5N1": record.h5n1,
        "H5N2": record.h5n2,
        "H7N2": record.h7n2,
        "H7N8": record.h7n8,
        "timestamp": record.timestamp,
        "provenance": record.provenance,
    }


def record_from_payload(payload: object, index: int) -> CanonicalRecord:
    """Deserialize one JSON object into a CanonicalRecord.

    Missing or null keys take zero values and unknown keys are ignored.

    Args:
        payload: Decoded JSON value.
        index: Zero-based position used in error messages.

    Returns:
        Typed record.

    Raises:
        FluDecodeError: If the value is not an object or a field has the wrong type.
    """
    if not isinstance(payload, dict):
        raise FluDecodeError(
            f"Invalid record at index {index}: expected JSON object, "
            f"got {type(payload).__name__}."
        )
    values: dict[str, Any] = {}
    for key, attribute in _FLOAT_FIELDS:
        values[attribute] = _float_field(payload.get(key), key, index)
    for key, attribute in _TEXT_FIELDS:
        values[attribute] = _text_field(payload.get(key), key, index)
    return CanonicalRecord(**values)


def records_from_json_bytes(content: bytes) -> list[CanonicalRecord]:
    """Decode a JSON array of record objects.

    Args:
        content: Raw UTF-8 JSON document.

    Returns:
        Records in document order.

    Raises:
        FluDecodeError: If the document is not a JSON array of record objects.
    """
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as error:
        raise FluDecodeError(
            f"Failed to decode JSON upload: not valid UTF-8 ({error.reason})."
        ) from error
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as error:
        raise FluDecodeError(
            f"Failed to parse JSON upload at line {error.lineno} column {error.colno}: "
            f"{error.msg}."
        ) from error
    except RecursionError as error:
        raise FluDecodeError(
            "Failed to parse JSON upload: nesting is too deep. "
            "Upload a flat array of record objects."
        ) from error
    if not isinstance(payload, list):
        raise FluDecodeError(
            "Invalid JSON upload: expected a top-level array of records, "
            f"got {type(payload).__name__}."
        )
    return [record_from_payload(item, index) for index, item in enumerate(payload)]


def records_to_json_text(records: list[CanonicalRecord] | tuple[CanonicalRecord, ...]) -> str:
    """Render records as a JSON array document."""
    payload = [record_to_payload(record) for record in records]
    return json.dumps(payload, indent=2, allow_nan=False) + "\n"


def _float_field(value: object, key: str, index: int) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FluDecodeError(
            f"Invalid record at index {index}: field '{key}' must be a number, "
            f"got {type(value).__name__}."
        )
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise FluDecodeError(
            f"Invalid record at index {index}: field '{key}' must be finite."
        )
    return number


def _text_field(value: object, key: str, index: int) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise FluDecodeError(
            f"Invalid record at index {index}: field '{key}' must be a string, "
            f"got {type(value).__name__}."
        )
    return value


def _reject_constant(name: str) -> float:
    raise FluDecodeError(f"Invalid JSON upload: non-finite literal '{name}' is not allowed.")
