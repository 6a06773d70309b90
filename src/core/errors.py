"""Flumap exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each error carries the result kind that callers report for it.
"""

from __future__ import annotations


class FluError(Exception):
    """Base exception for all Flumap failures."""


class FluConfigError(FluError):
    """Raised for invalid runtime configuration."""


class FluIngestError(FluError):
    """Raised for upload parsing and ingest failures."""

    error_kind = "FormatError"


class FluUnsupportedFormatError(FluIngestError):
    """Raised when an upload suffix is not a recognized format."""

    error_kind = "UnsupportedFormat"


class FluDecodeError(FluIngestError):
    """Raised when upload bytes do not parse as the claimed format."""

    error_kind = "DecodeError"


class FluFormatError(FluIngestError):
    """Raised when parsed content violates structural or value rules."""

    error_kind = "FormatError"

    def __init__(self, message: str, violations: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.violations = violations


class FluStoreError(FluError):
    """Raised for dataset persistence failures."""

    error_kind = "StorageError"


class FluNotFoundError(FluStoreError):
    """Raised when a requested dataset does not exist."""

    error_kind = "NotFound"


class FluAuthError(FluError):
    """Raised when the credential list cannot be read."""
