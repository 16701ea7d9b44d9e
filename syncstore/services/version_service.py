"""Version ledger service for business logic."""

from typing import Optional

from common.logging_config import get_logger
from syncstore import validation
from syncstore.authorization import Authorizer
from syncstore.clock import Clock
from syncstore.database import Database
from syncstore.exceptions import SyncStoreException
from syncstore.repositories.content_repository import ContentRepository
from syncstore.repositories.device_repository import DeviceRepository
from syncstore.repositories.sync_status_repository import SyncStatus, SyncStatusRepository
from syncstore.repositories.version_repository import VersionRecord, VersionRepository

logger = get_logger(__name__)


class VersionService:
    def __init__(self, database: Database, clock: Clock):
        self.database = database
        self.clock = clock
        self.content_repo = ContentRepository(database)
        self.version_repo = VersionRepository(database)
        self.sync_repo = SyncStatusRepository(database)
        self.authorizer = Authorizer(self.content_repo, DeviceRepository(database))

    def add_version(
        self,
        identity: str,
        content_id: str,
        content_hash: bytes,
        device_id: str,
        change_description: str,
        size_bytes: int,
    ) -> int:
        """
        Append the next version of a content item.

        The ledger row, the catalog's latest_version and the producing
        device's sync status are written in one transaction.

        Args:
            identity: Verified caller identity
            content_id: Content owned by the caller
            content_hash: 32-byte digest of the new content
            device_id: Caller's device that produced the version
            change_description: Free text, at most 256 characters
            size_bytes: Size of the new content

        Returns:
            The new version number

        Raises:
            ContentNotFoundError: No owner has content_id
            NotAuthorizedError: The caller does not own content_id
            InvalidDeviceError: device_id is not registered to the caller
        """
        logger.info(f"Adding version to content {content_id} from device {device_id} [owner={identity}]")
        validation.require_identity(identity)
        validation.require_content_id(content_id)
        validation.require_device_id(device_id)
        validation.require_hash(content_hash)
        validation.require_change_description(change_description)
        validation.require_size(size_bytes)

        try:
            with self.database.transaction() as conn:
                item = self.authorizer.require_owned_content(identity, content_id, conn=conn)
                self.authorizer.require_user_device(identity, device_id, conn=conn)

                next_version = item.latest_version + 1
                now = self.clock.now()

                self.version_repo.insert_version(
                    identity,
                    VersionRecord(
                        content_id=content_id,
                        version=next_version,
                        hash=bytes(content_hash),
                        timestamp=now,
                        device_id=device_id,
                        change_description=change_description,
                        size_bytes=size_bytes,
                    ),
                    conn=conn,
                )
                self.content_repo.advance_version(
                    identity, content_id, next_version, size_bytes=size_bytes, last_modified=now, conn=conn
                )
                self.sync_repo.upsert_status(
                    identity,
                    SyncStatus(
                        content_id=content_id,
                        device_id=device_id,
                        latest_version=next_version,
                        last_synced=now,
                    ),
                    conn=conn,
                )
        except SyncStoreException:
            raise
        except Exception as e:
            logger.error(f"Failed to add version to content {content_id}: {e} [owner={identity}]", exc_info=True)
            raise

        logger.info(f"Version {next_version} added [content_id={content_id}] [owner={identity}]")
        return next_version

    def get_version_details(self, owner: str, content_id: str, version: int) -> Optional[VersionRecord]:
        return self.version_repo.get_version(owner, content_id, version)
