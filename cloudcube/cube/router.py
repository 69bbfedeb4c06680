"""FastAPI router exposing CloudCube uploads and deletes."""

import uuid
from functools import lru_cache
from pathlib import PurePosixPath
from typing import Dict, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from pydantic import BaseModel

from cloudcube.config.settings import settings

from .client import AUTH, NAME, PROVIDER, CubeStorage, init
from .errors import ConfigurationError, DeleteError, MismatchedURLError, UploadError
from .schemas import DeleteStrategy, FileRecord

router = APIRouter(prefix="/cube", tags=["CloudCube"])


@lru_cache(maxsize=1)
def _storage_from_settings() -> CubeStorage:
    return init(settings.cube.to_provider_config())


def get_storage() -> CubeStorage:
    """Provider built once from application settings."""
    try:
        return _storage_from_settings()
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=f"Storage not configured: {str(e)}")


# =======================
# Request/Response Models
# =======================
class ProviderInfo(BaseModel):
    """Provider identity and the configuration fields it expects."""
    provider: str
    name: str
    auth: Dict[str, Dict[str, str]]


class CubeUploadResponse(BaseModel):
    """Response after uploading a file to CloudCube."""
    url: str
    key: str
    hash: str
    ext: str
    mime: Optional[str] = None
    size: int


class CubeDeleteResponse(BaseModel):
    """Response after deleting a file from CloudCube."""
    key: str
    deleted: bool


# =======================
# GET Endpoints
# =======================
@router.get("/provider", response_model=ProviderInfo)
async def provider_info():
    return {"provider": PROVIDER, "name": NAME, "auth": AUTH}


# =======================
# POST Endpoints
# =======================
@router.post("/upload", response_model=CubeUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: UploadFile = File(..., description="File to upload"),
    path: Optional[str] = Query(None, description="Optional sub-directory inside the cube"),
    storage: CubeStorage = Depends(get_storage),
):
    """
    Upload a file to CloudCube under a random hash.

    The original filename only contributes its extension.
    """
    content = await file.read()
    record = FileRecord(
        hash=uuid.uuid4().hex,
        ext=PurePosixPath(file.filename or "").suffix.lower(),
        path=path or None,
        buffer=content,
        mime=file.content_type or "application/octet-stream",
    )
    try:
        await storage.upload(record)
    except UploadError as e:
        raise HTTPException(status_code=502, detail=f"Error uploading file: {str(e)}")

    return {
        "url": record.url,
        "key": storage.object_key(record),
        "hash": record.hash,
        "ext": record.ext,
        "mime": record.mime,
        "size": len(content),
    }


# =======================
# DELETE Endpoints
# =======================
@router.delete("/delete", response_model=CubeDeleteResponse)
async def delete_file(
    url: Optional[str] = Query(None, description="Public URL returned by upload"),
    hash: Optional[str] = Query(None, description="File hash, needed when keys are derived"),
    ext: str = Query("", description="File extension including the dot"),
    path: Optional[str] = Query(None, description="Sub-directory the file was uploaded to"),
    storage: CubeStorage = Depends(get_storage),
):
    """
    Delete a file from CloudCube.

    With the default URL strategy only ``url`` is needed; the derive strategy
    needs ``hash`` (plus ``ext`` and ``path`` if the upload used them).
    """
    if storage.params.delete_strategy == DeleteStrategy.DERIVE and not hash:
        raise HTTPException(status_code=422, detail="hash is required to derive the object key")
    if storage.params.delete_strategy == DeleteStrategy.URL and not url:
        raise HTTPException(status_code=422, detail="url is required")

    record = FileRecord(hash=hash or "", ext=ext, path=path or None, url=url)
    try:
        key = storage.delete_key(record)
        await storage.delete_object(key)
    except MismatchedURLError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DeleteError as e:
        raise HTTPException(status_code=502, detail=f"Error deleting file: {str(e)}")

    return {"key": key, "deleted": True}


__all__ = ["router", "get_storage"]
