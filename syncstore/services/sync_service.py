"""Sync status service for business logic."""

from typing import Optional

from common.constants import INITIAL_VERSION
from common.logging_config import get_logger
from syncstore import validation
from syncstore.authorization import Authorizer
from syncstore.clock import Clock
from syncstore.database import Database
from syncstore.exceptions import InvalidVersionError, VersionNotFoundError
from syncstore.repositories.content_repository import ContentRepository
from syncstore.repositories.device_repository import DeviceRepository
from syncstore.repositories.sync_status_repository import SyncStatus, SyncStatusRepository

logger = get_logger(__name__)


class SyncService:
    def __init__(self, database: Database, clock: Clock):
        self.database = database
        self.clock = clock
        self.content_repo = ContentRepository(database)
        self.sync_repo = SyncStatusRepository(database)
        self.authorizer = Authorizer(self.content_repo, DeviceRepository(database))

    def update_sync_status(self, identity: str, content_id: str, device_id: str, synced_version: int) -> SyncStatus:
        """
        Record that a device has caught up to synced_version.

        The bound is the item's latest_version as read inside the transaction.
        """
        logger.info(
            f"Device {device_id} reports version {synced_version} of content {content_id} [owner={identity}]"
        )
        validation.require_identity(identity)
        validation.require_content_id(content_id)
        validation.require_device_id(device_id)
        if isinstance(synced_version, bool) or not isinstance(synced_version, int):
            raise InvalidVersionError("synced_version must be an integer")

        with self.database.transaction() as conn:
            item = self.authorizer.require_owned_content(identity, content_id, conn=conn, report_missing=False)
            self.authorizer.require_user_device(identity, device_id, conn=conn)

            if synced_version < INITIAL_VERSION:
                logger.warning(f"Synced version {synced_version} below {INITIAL_VERSION} [owner={identity}]")
                raise InvalidVersionError(f"synced_version must be at least {INITIAL_VERSION}")

            if synced_version > item.latest_version:
                logger.warning(
                    f"Synced version {synced_version} beyond latest {item.latest_version} "
                    f"[content_id={content_id}] [owner={identity}]"
                )
                raise VersionNotFoundError(
                    f"Version {synced_version} of {content_id} does not exist (latest is {item.latest_version})"
                )

            status = self.sync_repo.upsert_status(
                identity,
                SyncStatus(
                    content_id=content_id,
                    device_id=device_id,
                    latest_version=synced_version,
                    last_synced=self.clock.now(),
                ),
                conn=conn,
            )

        logger.info(f"Sync status recorded [content_id={content_id}] [device_id={device_id}] [owner={identity}]")
        return status

    def get_device_sync_info(self, owner: str, content_id: str, device_id: str) -> Optional[SyncStatus]:
        return self.sync_repo.get_status(owner, content_id, device_id)
