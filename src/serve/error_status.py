"""Error-kind to HTTP status mapping."""

from __future__ import annotations

from fastapi.responses import JSONResponse

ERROR_STATUS_CODES: dict[str, int] = {
    "UnsupportedFormat": 415,
    "DecodeError": 400,
    "FormatError": 422,
    "NotFound": 404,
    "StorageError": 500,
}
UPLOAD_TOO_LARGE_STATUS = 413


def error_response(error_kind: str, message: str | None) -> JSONResponse:
    """Build the JSON failure body for one error kind."""
    status_code = ERROR_STATUS_CODES.get(error_kind, ERROR_STATUS_CODES["StorageError"])
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "errorKind": error_kind, "message": message or ""},
    )
