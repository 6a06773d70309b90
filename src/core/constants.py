"""Core constants used across Flumap modules.

This module centralizes schema and storage constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path("data")
DATASETS_DIR_NAME = "datasets"
DATASET_FILE_SUFFIX = ".json"
TEMP_FILE_PREFIX = ".tmp-"
DEFAULT_USERS_FILE = Path("login") / "users.csv"
DEFAULT_DATASET_NAME = "fake_bird_data_switzerland_v2"
DEFAULT_CORS_ORIGIN = "http://localhost:3000"
DEFAULT_PORT = 5001
DEFAULT_MAX_UPLOAD_BYTES = 10 << 20
CSV_SUFFIX = ".csv"
JSON_SUFFIX = ".json"
SUBTYPE_FIELDS = ("H5N1", "H5N2", "H7N2", "H7N8")
CSV_COLUMNS = (
    "latitude",
    "longitude",
    "species",
    *SUBTYPE_FIELDS,
    "timestamp",
    "provenance",
)
CSV_COLUMN_COUNT = len(CSV_COLUMNS)
MISSING_TITER_VALUE = 0.0
MAX_REPORTED_VIOLATIONS = 10
