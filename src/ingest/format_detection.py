"""Upload format detection.

This module classifies uploads by file-name suffix and derives the
dataset name an upload is stored under.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from core.constants import CSV_SUFFIX, JSON_SUFFIX
from core.types import UploadFormat


def detect_format(file_name: str) -> UploadFormat:
    """Classify an upload from its file-name suffix alone.

    Args:
        file_name: Client-supplied file name, possibly with directories.

    Returns:
        ``"csv"``, ``"json"``, or ``"unsupported"``.
    """
    suffix = PurePosixPath(_base_name(file_name)).suffix.lower()
    if suffix == CSV_SUFFIX:
        return "csv"
    if suffix == JSON_SUFFIX:
        return "json"
    return "unsupported"


def dataset_name_from_file_name(file_name: str) -> str:
    """Derive the dataset name from an upload file name.

    ``surveys/foo.csv`` and ``foo.json`` both resolve to ``foo``.

    Args:
        file_name: Client-supplied file name.

    Returns:
        Base name with its final extension removed.
    """
    base_name = _base_name(file_name)
    suffix = PurePosixPath(base_name).suffix
    return base_name[: -len(suffix)] if suffix else base_name


def _base_name(file_name: str) -> str:
    # Browsers on Windows may send full paths with backslashes.
    return file_name.replace("\\", "/").rsplit("/", 1)[-1].strip()
