"""Unit tests for CSV row canonicalization."""

from __future__ import annotations

import pytest

from core.errors import FluFormatError
from core.types import CanonicalRecord
from ingest.canonicalize import canonicalize_rows, parse_lenient_float


def test_canonicalize_rows_maps_columns_in_order() -> None:
    """Empty titers become zero while present ones are parsed."""
    rows = [["46.5", "6.6", "Mallard", "0.1", "", "", "", "2024-01-01", "FieldSurveyA"]]

    records = canonicalize_rows(rows)

    assert records == [
        CanonicalRecord(
            latitude=46.5,
            longitude=6.6,
            species="Mallard",
            h5n1=0.1,
            h5n2=0.0,
            h7n2=0.0,
            h7n8=0.0,
            timestamp="2024-01-01",
            provenance="FieldSurveyA",
        )
    ]


def test_canonicalize_rows_keeps_text_columns_verbatim() -> None:
    """Species, timestamp, and provenance are not trimmed or parsed."""
    rows = [["1", "2", " Mute Swan ", "", "", "", "", "spring 2024", " lab "]]

    record = canonicalize_rows(rows)[0]

    assert (record.species, record.timestamp, record.provenance) == (
        " Mute Swan ",
        "spring 2024",
        " lab ",
    )


def test_canonicalize_rows_preserves_row_order() -> None:
    """One record per row in input order."""
    rows = [[str(index), "1", f"bird-{index}", "", "", "", "", "", ""] for index in range(1, 6)]

    records = canonicalize_rows(rows)

    assert [record.species for record in records] == [f"bird-{index}" for index in range(1, 6)]


def test_canonicalize_rows_raises_for_narrow_row() -> None:
    """A row narrower than the schema is an internal fault, not an IndexError."""
    with pytest.raises(FluFormatError):
        canonicalize_rows([["46.5", "6.6", "Mallard"]])


@pytest.mark.parametrize(
    ("cell", "expected"),
    [
        ("0.25", 0.25),
        (" 1.5 ", 1.5),
        ("-3", -3.0),
        ("", 0.0),
        ("n/a", 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
    ],
)
def test_parse_lenient_float_falls_back_to_zero(cell: str, expected: float) -> None:
    """Unparsable, empty, and non-finite cells become zero."""
    assert parse_lenient_float(cell) == expected
