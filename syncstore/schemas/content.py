"""Pydantic schemas for content, version and sync status endpoints."""

from pydantic import BaseModel, Field

from common.constants import SQLITE_MAX_INTEGER


class CreateContentRequest(BaseModel):
    """Request model for content creation."""
    content_id: str
    title: str
    content_type: str
    size_bytes: int = Field(ge=0, le=SQLITE_MAX_INTEGER)


class UpdateContentRequest(BaseModel):
    """Request model for content metadata update."""
    title: str
    content_type: str
    size_bytes: int = Field(ge=0, le=SQLITE_MAX_INTEGER)


class ContentInfoResponse(BaseModel):
    """Response model for a content catalog record."""
    content_id: str
    owner: str
    title: str
    content_type: str
    created_at: int
    last_modified: int
    size_bytes: int
    latest_version: int


class ContentExistsResponse(BaseModel):
    exists: bool


class AddVersionRequest(BaseModel):
    """Request model for a new version. hash is hex encoded."""
    hash: str
    device_id: str
    change_description: str
    size_bytes: int = Field(ge=0, le=SQLITE_MAX_INTEGER)


class AddVersionResponse(BaseModel):
    version: int


class VersionDetailsResponse(BaseModel):
    """Response model for a version ledger record."""
    content_id: str
    version: int
    hash: str
    timestamp: int
    device_id: str
    change_description: str
    size_bytes: int


class UpdateSyncStatusRequest(BaseModel):
    synced_version: int


class SyncStatusResponse(BaseModel):
    """Response model for a device's sync progress."""
    content_id: str
    device_id: str
    latest_version: int
    last_synced: int
