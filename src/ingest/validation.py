"""Structural validation for parsed uploads.

CSV rows are checked for shape only because their cells are untyped
strings. Decoded JSON records are checked for values because decoding
already enforced types. The two entry points stay separate.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import CSV_COLUMN_COUNT, CSV_COLUMNS, MAX_REPORTED_VIOLATIONS
from core.errors import FluFormatError
from core.types import CanonicalRecord


def validate_csv_rows(rows: Sequence[Sequence[str]]) -> None:
    """Check CSV row shape before canonicalization.

    Args:
        rows: Decoded rows, header row first.

    Raises:
        FluFormatError: If there is no data row or any row has the wrong width.
    """
    if len(rows) < 2:
        raise FluFormatError(
            "Invalid CSV upload: expected a header row and at least one data row. "
            "Add observation rows and retry."
        )
    header = rows[0]
    if len(header) != CSV_COLUMN_COUNT:
        raise FluFormatError(
            f"Invalid CSV upload: header has {len(header)} columns, expected "
            f"{CSV_COLUMN_COUNT} ({', '.join(CSV_COLUMNS)})."
        )
    for row_number, row in enumerate(rows[1:], start=1):
        if len(row) != CSV_COLUMN_COUNT:
            raise FluFormatError(
                f"Invalid CSV upload: data row {row_number} has {len(row)} fields, "
                f"expected {CSV_COLUMN_COUNT}. Make every row match the header."
            )


def validate_record_list(records: Sequence[CanonicalRecord]) -> None:
    """Check every decoded record for required values.

    Zero latitude or longitude counts as missing, so observations on the
    equator or prime meridian are rejected.

    Args:
        records: Decoded records in upload order.

    Raises:
        FluFormatError: Listing every offending record.
    """
    collected: list[str] = []
    for index, record in enumerate(records):
        problems = _record_problems(record)
        if problems:
            collected.append(f"record {index}: {', '.join(problems)}")
    violations = tuple(collected)
    if not violations:
        return
    shown = list(violations[:MAX_REPORTED_VIOLATIONS])
    hidden_count = len(violations) - len(shown)
    if hidden_count:
        shown.append(f"... and {hidden_count} more")
    raise FluFormatError(
        f"Invalid JSON upload: {len(violations)} record(s) failed validation: "
        + "; ".join(shown),
        violations=violations,
    )


def _record_problems(record: CanonicalRecord) -> list[str]:
    problems: list[str] = []
    if record.latitude == 0:
        problems.append("latitude is zero")
    if record.longitude == 0:
        problems.append("longitude is zero")
    if not record.species:
        problems.append("species is empty")
    return problems
