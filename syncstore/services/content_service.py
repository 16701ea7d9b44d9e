"""Content catalog service for business logic."""

from typing import Optional

from common.constants import INITIAL_VERSION
from common.logging_config import get_logger
from syncstore import validation
from syncstore.authorization import Authorizer
from syncstore.clock import Clock
from syncstore.database import Database
from syncstore.exceptions import ContentAlreadyExistsError, SyncStoreException
from syncstore.repositories.content_repository import ContentItem, ContentRepository
from syncstore.repositories.device_repository import DeviceRepository
from syncstore.repositories.version_repository import VersionRepository

logger = get_logger(__name__)


class ContentService:
    def __init__(self, database: Database, clock: Clock):
        self.database = database
        self.clock = clock
        self.content_repo = ContentRepository(database)
        self.version_repo = VersionRepository(database)
        self.authorizer = Authorizer(self.content_repo, DeviceRepository(database))

    def create_content(
        self,
        identity: str,
        content_id: str,
        title: str,
        content_type: str,
        size_bytes: int,
    ) -> ContentItem:
        """
        Create a catalog row at version 1.

        No ledger row is written for version 1; the first AddVersion
        produces version 2. A content_id whose deleted predecessor left
        ledger rows cannot be reused, so history is never mixed.
        """
        logger.info(f"Creating content {content_id} [owner={identity}]")
        validation.require_identity(identity)
        validation.require_content_id(content_id)
        validation.require_content_fields(title, content_type, size_bytes)

        try:
            with self.database.transaction() as conn:
                if self.content_repo.get_content(identity, content_id, conn=conn) is not None:
                    logger.warning(f"Content already exists [content_id={content_id}] [owner={identity}]")
                    raise ContentAlreadyExistsError(f"Content {content_id} already exists")

                if self.version_repo.has_history(identity, content_id, conn=conn):
                    logger.warning(
                        f"Deleted content still has version history [content_id={content_id}] [owner={identity}]"
                    )
                    raise ContentAlreadyExistsError(
                        f"Content {content_id} was deleted but its version history is retained"
                    )

                now = self.clock.now()
                item = self.content_repo.create_content(
                    ContentItem(
                        content_id=content_id,
                        owner=identity,
                        title=title,
                        content_type=content_type,
                        created_at=now,
                        last_modified=now,
                        size_bytes=size_bytes,
                        latest_version=INITIAL_VERSION,
                    ),
                    conn=conn,
                )
        except SyncStoreException:
            raise
        except Exception as e:
            logger.error(f"Failed to create content {content_id}: {e} [owner={identity}]", exc_info=True)
            raise

        logger.info(f"Content created [content_id={content_id}] [owner={identity}]")
        return item

    def update_content(
        self,
        identity: str,
        content_id: str,
        title: str,
        content_type: str,
        size_bytes: int,
    ) -> None:
        logger.info(f"Updating content {content_id} [owner={identity}]")
        validation.require_identity(identity)
        validation.require_content_id(content_id)
        validation.require_content_fields(title, content_type, size_bytes)

        with self.database.transaction() as conn:
            self.authorizer.require_owned_content(identity, content_id, conn=conn)
            self.content_repo.update_metadata(
                identity,
                content_id,
                title=title,
                content_type=content_type,
                size_bytes=size_bytes,
                last_modified=self.clock.now(),
                conn=conn,
            )

        logger.info(f"Content updated [content_id={content_id}] [owner={identity}]")

    def delete_content(self, identity: str, content_id: str) -> None:
        """
        Delete the caller's catalog row.

        Version ledger and sync status rows for the item are kept.
        """
        logger.info(f"Deleting content {content_id} [owner={identity}]")
        validation.require_identity(identity)
        validation.require_content_id(content_id)

        with self.database.transaction() as conn:
            self.authorizer.require_owned_content(identity, content_id, conn=conn, report_missing=False)
            self.content_repo.delete_content(identity, content_id, conn=conn)

        logger.info(f"Content deleted [content_id={content_id}] [owner={identity}]")

    def get_content_info(self, content_id: str, owner: str) -> Optional[ContentItem]:
        return self.content_repo.get_content(owner, content_id)

    def content_exists(self, content_id: str, owner: str) -> bool:
        return self.content_repo.get_content(owner, content_id) is not None
