"""Ownership and device membership checks shared by the services."""

from common.logging_config import get_logger
from syncstore.exceptions import ContentNotFoundError, InvalidDeviceError, NotAuthorizedError
from syncstore.repositories.content_repository import ContentItem, ContentRepository
from syncstore.repositories.device_repository import DeviceRepository

logger = get_logger(__name__)


class Authorizer:
    def __init__(self, content_repo: ContentRepository, device_repo: DeviceRepository):
        self.content_repo = content_repo
        self.device_repo = device_repo

    def require_owned_content(
        self,
        identity: str,
        content_id: str,
        conn=None,
        report_missing: bool = True
    ) -> ContentItem:
        """
        Return the caller's catalog row for content_id.

        Args:
            identity: Verified caller identity
            content_id: Content identifier, scoped to the caller
            conn: Open connection of the surrounding transaction
            report_missing: When True, a content_id no owner has raises
                ContentNotFoundError. When False every miss is NotAuthorizedError.

        Raises:
            NotAuthorizedError: The caller has no row for content_id
            ContentNotFoundError: No owner has a row for content_id
        """
        item = self.content_repo.get_content(identity, content_id, conn=conn)
        if item is not None:
            return item

        if report_missing and not self.content_repo.content_id_in_use(content_id, conn=conn):
            logger.warning(f"Content not found [content_id={content_id}] [owner={identity}]")
            raise ContentNotFoundError(f"Content {content_id} does not exist")

        logger.warning(f"Caller does not own content [content_id={content_id}] [owner={identity}]")
        raise NotAuthorizedError(f"Caller is not the owner of content {content_id}")

    def require_user_device(self, identity: str, device_id: str, conn=None) -> None:
        if not self.device_repo.has_device(identity, device_id, conn=conn):
            logger.warning(f"Device not registered to caller [device_id={device_id}] [owner={identity}]")
            raise InvalidDeviceError(f"Device {device_id} is not registered to the caller")
