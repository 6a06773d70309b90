"""Unit tests for structural validation."""

from __future__ import annotations

import pytest

from core.constants import CSV_COLUMNS, MAX_REPORTED_VIOLATIONS
from core.errors import FluFormatError
from core.types import CanonicalRecord
from ingest.validation import validate_csv_rows, validate_record_list

_DATA_ROW = ["46.5", "6.6", "Mallard", "0.1", "", "", "", "2024-01-01", "FieldSurveyA"]


def test_validate_csv_rows_accepts_header_and_data() -> None:
    """Nine-column header with one data row should pass."""
    validate_csv_rows([list(CSV_COLUMNS), _DATA_ROW])


def test_validate_csv_rows_ignores_cell_types() -> None:
    """Shape checks should not look at numeric content."""
    validate_csv_rows([list(CSV_COLUMNS), ["north", "east", *_DATA_ROW[2:]]])


def test_validate_csv_rows_rejects_header_only() -> None:
    """A header without data rows is a format failure."""
    with pytest.raises(FluFormatError):
        validate_csv_rows([list(CSV_COLUMNS)])


def test_validate_csv_rows_rejects_empty_document() -> None:
    """An empty document is a format failure."""
    with pytest.raises(FluFormatError):
        validate_csv_rows([])


@pytest.mark.parametrize("width", [8, 10])
def test_validate_csv_rows_rejects_wrong_header_width(width: int) -> None:
    """Header width must match the nine-column schema."""
    header = [f"column_{index}" for index in range(width)]

    with pytest.raises(FluFormatError):
        validate_csv_rows([header, ["1"] * width])


@pytest.mark.parametrize("width", [8, 10])
def test_validate_csv_rows_rejects_wrong_data_row_width(width: int) -> None:
    """Every data row must be as wide as the header."""
    with pytest.raises(FluFormatError, match="data row 2"):
        validate_csv_rows([list(CSV_COLUMNS), _DATA_ROW, ["1"] * width])


def test_validate_record_list_accepts_valid_records() -> None:
    """Records with coordinates and species should pass."""
    validate_record_list([CanonicalRecord(latitude=46.5, longitude=6.6, species="Mallard")])


def test_validate_record_list_accepts_empty_list() -> None:
    """An empty record list has no offending records."""
    validate_record_list([])


def test_validate_record_list_reports_every_offender() -> None:
    """Every offending record should be listed."""
    records = [
        CanonicalRecord(latitude=46.5, longitude=6.6, species="Mallard"),
        CanonicalRecord(latitude=0.0, longitude=6.6, species="Mute Swan"),
        CanonicalRecord(latitude=46.2, longitude=0.0, species=""),
    ]

    with pytest.raises(FluFormatError) as error_info:
        validate_record_list(records)

    assert error_info.value.violations == (
        "record 1: latitude is zero",
        "record 2: longitude is zero, species is empty",
    )


def test_validate_record_list_accepts_whitespace_species() -> None:
    """Only a truly empty species is missing; whitespace is kept as given."""
    validate_record_list([CanonicalRecord(latitude=1.5, longitude=2.5, species=" ")])


def test_validate_record_list_truncates_long_messages() -> None:
    """The message should stay bounded while violations keep every entry."""
    records = [CanonicalRecord(latitude=0.0, longitude=1.0, species="Mallard")] * 25

    with pytest.raises(FluFormatError) as error_info:
        validate_record_list(records)

    message = str(error_info.value)
    assert (
        len(error_info.value.violations) == 25
        and f"and {25 - MAX_REPORTED_VIOLATIONS} more" in message
    )
