"""Flat-file credential list.

This module reads ``username,password`` rows from a CSV file with a
header row and answers match/no-match lookups.
"""

from __future__ import annotations

import csv
from pathlib import Path

from core.errors import FluAuthError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class CredentialList:
    """Read-only credential list backed by a CSV file."""

    def __init__(self, users_file: Path) -> None:
        self._users_file = users_file

    def verify(self, username: str, password: str) -> bool:
        """Return whether the pair appears in the credential list.

        The file is re-read on every call so edits take effect immediately.

        Raises:
            FluAuthError: If the credential list cannot be read.
        """
        for row_username, row_password in self._load_pairs():
            if row_username == username and row_password == password:
                _LOGGER.info("login_accepted", username=username)
                return True
        _LOGGER.info("login_rejected", username=username)
        return False

    def _load_pairs(self) -> list[tuple[str, str]]:
        try:
            with self._users_file.open(newline="", encoding="utf-8") as handle:
                rows = list(csv.reader(handle))
        except (OSError, UnicodeDecodeError, csv.Error) as error:
            raise FluAuthError(
                f"Failed to read credential list at {self._users_file}: {error}. "
                "Set FLUMAP_USERS_FILE to a readable CSV file."
            ) from error
        return [(row[0], row[1]) for row in rows[1:] if len(row) >= 2]
