"""Unit tests for CSV upload decoding."""

from __future__ import annotations

import pytest

from core.errors import FluDecodeError
from ingest.csv_decoder import decode_csv
from tests.fixture_paths import fixture_bytes


def test_decode_csv_keeps_header_and_order() -> None:
    """Decoder should return every row including the header."""
    rows = decode_csv(fixture_bytes("uploads/swiss_survey.csv"))

    assert rows[0][0] == "latitude" and [row[2] for row in rows[1:]] == [
        "Mallard",
        "Mute Swan",
        "Black-headed Gull",
    ]


def test_decode_csv_keeps_empty_cells() -> None:
    """Empty measurement cells stay as empty strings."""
    rows = decode_csv(b"a,b,c\n1,,3\n")

    assert rows[1] == ["1", "", "3"]


def test_decode_csv_skips_blank_lines_and_bom() -> None:
    """Blank lines and a UTF-8 BOM should not produce rows."""
    rows = decode_csv("\ufeffa,b\n\n1,2\n\n".encode("utf-8"))

    assert rows == [["a", "b"], ["1", "2"]]


def test_decode_csv_does_not_check_schema_width() -> None:
    """Column count against the schema is the validator's job."""
    rows = decode_csv(b"a,b\n1,2\n")

    assert len(rows[0]) == 2


def test_decode_csv_raises_for_bad_quoting() -> None:
    """Malformed quoting should be a decode failure."""
    with pytest.raises(FluDecodeError):
        decode_csv(fixture_bytes("uploads/bad_quotes.csv"))


def test_decode_csv_keeps_ragged_rows() -> None:
    """Row widths are passed through for validation to judge."""
    rows = decode_csv(b"a,b,c\n1,2\n")

    assert rows == [["a", "b", "c"], ["1", "2"]]


def test_decode_csv_raises_for_non_utf8_bytes() -> None:
    """Undecodable bytes should be a decode failure."""
    with pytest.raises(FluDecodeError):
        decode_csv(b"a,b\n\xff\xfe,1\n")
