"""CSV upload decoding.

This module turns raw upload bytes into string rows. It checks that
the text is well-formed delimited data and nothing more.
"""

from __future__ import annotations

import csv
import io

from core.errors import FluDecodeError


def decode_csv(content: bytes) -> list[list[str]]:
    """Parse CSV bytes into rows, header row included.

    Blank lines are skipped. Row widths are left to validation.

    Args:
        content: Raw upload bytes, UTF-8 with optional BOM.

    Returns:
        Ordered rows of string fields.

    Raises:
        FluDecodeError: If bytes are not UTF-8 or not well-formed CSV.
    """
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as error:
        raise FluDecodeError(
            f"Failed to decode CSV upload: not valid UTF-8 ({error.reason}). "
            "Save the file with UTF-8 encoding and retry."
        ) from error
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    rows: list[list[str]] = []
    try:
        for row in reader:
            if not row:
                continue
            rows.append(row)
    except csv.Error as error:
        raise FluDecodeError(
            f"Failed to parse CSV upload at line {reader.line_num}: {error}. "
            "Fix the quoting and retry."
        ) from error
    return rows
