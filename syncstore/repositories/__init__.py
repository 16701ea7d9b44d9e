"""Repository layer for data access."""

from syncstore.repositories.device_repository import Device, DeviceRepository
from syncstore.repositories.content_repository import ContentItem, ContentRepository
from syncstore.repositories.version_repository import VersionRecord, VersionRepository
from syncstore.repositories.sync_status_repository import SyncStatus, SyncStatusRepository

__all__ = [
    "Device",
    "DeviceRepository",
    "ContentItem",
    "ContentRepository",
    "VersionRecord",
    "VersionRepository",
    "SyncStatus",
    "SyncStatusRepository",
]
