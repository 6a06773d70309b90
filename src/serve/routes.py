"""API routes for uploading, listing, and reading datasets."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from core.errors import FluAuthError
from serve.error_status import UPLOAD_TOO_LARGE_STATUS, error_response
from store.dataset_sdk import FluClient
from store.record_payload import record_to_payload

router = APIRouter()


class LoginRequest(BaseModel):
    username: str
    password: str


def get_client(request: Request) -> FluClient:
    """Return the SDK client attached to the running app."""
    return request.app.state.client


@router.get("/data")
def read_dataset(
    database: str | None = Query(None, description="Dataset name; default dataset when omitted"),
    client: FluClient = Depends(get_client),
) -> Any:
    """Return the canonical records of one dataset."""
    result = client.fetch(database)
    if not result.ok:
        return error_response(result.error_kind or "StorageError", result.message)
    return [record_to_payload(record) for record in result.records]


@router.get("/files")
def list_files(client: FluClient = Depends(get_client)) -> list[str]:
    """Return the names of all stored datasets."""
    return list(client.list_datasets())


@router.post("/upload")
async def upload_file(
    file: UploadFile = File(...),
    client: FluClient = Depends(get_client),
) -> Any:
    """Ingest one uploaded CSV or JSON file."""
    max_bytes = client.config.max_upload_bytes
    content = await file.read(max_bytes + 1)
    if len(content) > max_bytes:
        return JSONResponse(
            status_code=UPLOAD_TOO_LARGE_STATUS,
            content={
                "success": False,
                "errorKind": "PayloadTooLarge",
                "message": f"Upload exceeds the {max_bytes} byte limit.",
            },
        )
    result = await run_in_threadpool(client.ingest, file.filename or "", content)
    if not result.ok:
        return error_response(result.error_kind or "StorageError", result.message)
    return {
        "success": True,
        "message": "File uploaded successfully",
        "datasetName": result.dataset_name,
        "recordCount": result.record_count,
    }


@router.post("/login")
def login(payload: LoginRequest, client: FluClient = Depends(get_client)) -> Any:
    """Check credentials against the configured credential list."""
    try:
        accepted = client.verify_login(payload.username, payload.password)
    except FluAuthError as error:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": str(error)},
        )
    if not accepted:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"success": False, "message": "Invalid username or password"},
        )
    return {"success": True, "message": "Login successful"}
