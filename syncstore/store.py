"""Public call surface of the sync metadata store."""

from typing import List, Optional

from syncstore.clock import Clock, SystemClock
from syncstore.database import Database
from syncstore.repositories.content_repository import ContentItem
from syncstore.repositories.device_repository import Device
from syncstore.repositories.sync_status_repository import SyncStatus
from syncstore.repositories.version_repository import VersionRecord
from syncstore.services.content_service import ContentService
from syncstore.services.device_service import DeviceService
from syncstore.services.sync_service import SyncService
from syncstore.services.version_service import VersionService


class MetadataStore:
    """
    Device registry, content catalog, version ledger and sync status
    behind one object.

    Mutating calls take the verified caller identity first. Reads are
    scoped by an explicit owner.
    """

    def __init__(self, database: Database, clock: Optional[Clock] = None):
        self.database = database
        self.clock = clock or SystemClock()
        self.devices = DeviceService(database, self.clock)
        self.contents = ContentService(database, self.clock)
        self.versions = VersionService(database, self.clock)
        self.sync = SyncService(database, self.clock)

    def register_device(self, identity: str, device_id: str, device_name: str) -> Device:
        return self.devices.register_device(identity, device_id, device_name)

    def remove_device(self, identity: str, device_id: str) -> None:
        self.devices.remove_device(identity, device_id)

    def is_user_device(self, identity: str, device_id: str) -> bool:
        return self.devices.is_user_device(identity, device_id)

    def get_user_devices(self, identity: str) -> List[Device]:
        return self.devices.get_user_devices(identity)

    def create_content(
        self, identity: str, content_id: str, title: str, content_type: str, size_bytes: int
    ) -> ContentItem:
        return self.contents.create_content(identity, content_id, title, content_type, size_bytes)

    def update_content(
        self, identity: str, content_id: str, title: str, content_type: str, size_bytes: int
    ) -> None:
        self.contents.update_content(identity, content_id, title, content_type, size_bytes)

    def delete_content(self, identity: str, content_id: str) -> None:
        self.contents.delete_content(identity, content_id)

    def add_version(
        self,
        identity: str,
        content_id: str,
        content_hash: bytes,
        device_id: str,
        change_description: str,
        size_bytes: int,
    ) -> int:
        return self.versions.add_version(
            identity, content_id, content_hash, device_id, change_description, size_bytes
        )

    def update_sync_status(
        self, identity: str, content_id: str, device_id: str, synced_version: int
    ) -> SyncStatus:
        return self.sync.update_sync_status(identity, content_id, device_id, synced_version)

    def get_content_info(self, content_id: str, owner: str) -> Optional[ContentItem]:
        return self.contents.get_content_info(content_id, owner)

    def content_exists(self, content_id: str, owner: str) -> bool:
        return self.contents.content_exists(content_id, owner)

    def get_version_details(self, owner: str, content_id: str, version: int) -> Optional[VersionRecord]:
        return self.versions.get_version_details(owner, content_id, version)

    def get_device_sync_info(self, owner: str, content_id: str, device_id: str) -> Optional[SyncStatus]:
        return self.sync.get_device_sync_info(owner, content_id, device_id)
