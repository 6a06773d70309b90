"""CSV row canonicalization.

This module maps validated CSV data rows onto CanonicalRecord. Numeric
cells that are empty or unparsable become zero; an absent titer means
no detection.
"""

from __future__ import annotations

import math
from typing import Sequence

from core.constants import CSV_COLUMN_COUNT, MISSING_TITER_VALUE
from core.errors import FluFormatError
from core.types import CanonicalRecord


def canonicalize_rows(data_rows: Sequence[Sequence[str]]) -> list[CanonicalRecord]:
    """Convert CSV data rows into canonical records.

    Args:
        data_rows: Rows after the header, already shape-validated.

    Returns:
        One record per row, order preserved.

    Raises:
        FluFormatError: If a row is narrower than the schema, which the
            validator should have made unreachable.
    """
    return [_canonicalize_row(row, row_number) for row_number, row in enumerate(data_rows, 1)]


def parse_lenient_float(cell: str) -> float:
    """Parse a numeric cell, falling back to zero.

    Args:
        cell: Raw CSV cell.

    Returns:
        Parsed finite float, or ``0.0`` for empty, unparsable, or
        non-finite cells.
    """
    text = cell.strip()
    if not text:
        return MISSING_TITER_VALUE
    try:
        value = float(text)
    except ValueError:
        return MISSING_TITER_VALUE
    if not math.isfinite(value):
        return MISSING_TITER_VALUE
    return value


def _canonicalize_row(row: Sequence[str], row_number: int) -> CanonicalRecord:
    if len(row) < CSV_COLUMN_COUNT:
        raise FluFormatError(
            f"Internal consistency fault: CSV data row {row_number} has {len(row)} "
            f"columns, expected {CSV_COLUMN_COUNT} after validation."
        )
    return CanonicalRecord(
        latitude=parse_lenient_float(row[0]),
        longitude=parse_lenient_float(row[1]),
        species=row[2],
        h5n1=parse_lenient_float(row[3]),
        h5n2=parse_lenient_float(row[4]),
        h7n2=parse_lenient_float(row[5]),
        h7n8=parse_lenient_float(row[6]),
        timestamp=row[7],
        provenance=row[8],
    )
