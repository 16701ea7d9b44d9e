"""Service layer for business logic."""

from syncstore.services.device_service import DeviceService
from syncstore.services.content_service import ContentService
from syncstore.services.version_service import VersionService
from syncstore.services.sync_service import SyncService

__all__ = [
    "DeviceService",
    "ContentService",
    "VersionService",
    "SyncService",
]
