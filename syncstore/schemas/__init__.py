"""Pydantic schemas for API requests and responses."""

from syncstore.schemas.common import ErrorResponse
from syncstore.schemas.devices import (
    RegisterDeviceRequest,
    DeviceResponse,
    ListDevicesResponse
)
from syncstore.schemas.content import (
    CreateContentRequest,
    UpdateContentRequest,
    ContentInfoResponse,
    ContentExistsResponse,
    AddVersionRequest,
    AddVersionResponse,
    VersionDetailsResponse,
    UpdateSyncStatusRequest,
    SyncStatusResponse
)

__all__ = [
    "ErrorResponse",
    "RegisterDeviceRequest",
    "DeviceResponse",
    "ListDevicesResponse",
    "CreateContentRequest",
    "UpdateContentRequest",
    "ContentInfoResponse",
    "ContentExistsResponse",
    "AddVersionRequest",
    "AddVersionResponse",
    "VersionDetailsResponse",
    "UpdateSyncStatusRequest",
    "SyncStatusResponse"
]
