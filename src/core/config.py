"""Runtime configuration model for Flumap.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path

from core.constants import (
    DEFAULT_CORS_ORIGIN,
    DEFAULT_DATA_ROOT,
    DEFAULT_DATASET_NAME,
    DEFAULT_MAX_UPLOAD_BYTES,
    DEFAULT_PORT,
    DEFAULT_USERS_FILE,
)
from core.errors import FluConfigError


@dataclass(frozen=True)
class FluConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory holding persisted datasets.
        users_file: CSV credential list consulted by the login check.
        default_dataset: Dataset served when a fetch names none.
        cors_origin: Single origin allowed by the HTTP layer.
        port: HTTP listen port.
        max_upload_bytes: Largest accepted upload body.
    """

    data_root: Path
    users_file: Path
    default_dataset: str
    cors_origin: str
    port: int
    max_upload_bytes: int

    @classmethod
    def from_env(cls) -> "FluConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            FluConfigError: If environment values are invalid.
        """
        data_root = Path(os.getenv("FLUMAP_DATA_ROOT", str(DEFAULT_DATA_ROOT)))
        data_root = data_root.expanduser().resolve()
        users_file_value = os.getenv("FLUMAP_USERS_FILE")
        users_file = (
            Path(users_file_value).expanduser().resolve()
            if users_file_value
            else data_root / DEFAULT_USERS_FILE
        )
        default_dataset = os.getenv("FLUMAP_DEFAULT_DATASET", DEFAULT_DATASET_NAME).strip()
        if not default_dataset:
            raise FluConfigError(
                "Invalid FLUMAP_DEFAULT_DATASET value: expected a non-empty dataset name. "
                "Unset the variable to use the built-in default."
            )
        return cls(
            data_root=data_root,
            users_file=users_file,
            default_dataset=default_dataset,
            cors_origin=os.getenv("FLUMAP_CORS_ORIGIN", DEFAULT_CORS_ORIGIN),
            port=_parse_positive_int("FLUMAP_PORT", os.getenv("FLUMAP_PORT"), DEFAULT_PORT),
            max_upload_bytes=_parse_positive_int(
                "FLUMAP_MAX_UPLOAD_BYTES",
                os.getenv("FLUMAP_MAX_UPLOAD_BYTES"),
                DEFAULT_MAX_UPLOAD_BYTES,
            ),
        )

    def with_data_root(self, data_root: Path) -> "FluConfig":
        """Return a copy rooted elsewhere.

        A credential list at its default location under the old root moves
        with the data root. An explicitly configured list stays put.
        """
        users_file = self.users_file
        if users_file == self.data_root / DEFAULT_USERS_FILE:
            users_file = data_root / DEFAULT_USERS_FILE
        return replace(self, data_root=data_root, users_file=users_file)


def _parse_positive_int(variable: str, raw_value: str | None, default: int) -> int:
    """Parse a positive integer environment value.

    Args:
        variable: Environment variable name for error context.
        raw_value: Raw string from environment, if set.
        default: Value used when the variable is unset.

    Returns:
        Parsed integer.

    Raises:
        FluConfigError: If value is not a positive integer.
    """
    if raw_value is None:
        return default
    try:
        value = int(raw_value)
    except ValueError as error:
        raise FluConfigError(
            f"Invalid {variable} value: expected integer, got '{raw_value}'. "
            f"Set {variable} to a numeric value."
        ) from error
    if value <= 0:
        raise FluConfigError(
            f"Invalid {variable} value: expected a positive integer, got {value}."
        )
    return value
