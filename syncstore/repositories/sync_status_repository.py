"""Sync status repository for database operations."""

from dataclasses import dataclass
from typing import Optional

from common.logging_config import get_logger
from syncstore.database import Database

logger = get_logger(__name__)


@dataclass(frozen=True)
class SyncStatus:
    content_id: str
    device_id: str
    latest_version: int
    last_synced: int


class SyncStatusRepository:
    def __init__(self, database: Database):
        self.database = database

    def upsert_status(self, owner: str, status: SyncStatus, conn=None) -> SyncStatus:
        logger.debug(
            f"Recording device {status.device_id} at version {status.latest_version} "
            f"[content_id={status.content_id}] [owner={owner}]"
        )
        with self.database.connection(conn) as conn:
            conn.execute(
                """
                INSERT INTO sync_status (owner, content_id, device_id, latest_version, last_synced)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(owner, content_id, device_id)
                DO UPDATE SET latest_version = excluded.latest_version,
                              last_synced = excluded.last_synced
                """,
                (owner, status.content_id, status.device_id, status.latest_version, status.last_synced)
            )
        return status

    def get_status(self, owner: str, content_id: str, device_id: str, conn=None) -> Optional[SyncStatus]:
        with self.database.connection(conn) as conn:
            cursor = conn.execute(
                """
                SELECT content_id, device_id, latest_version, last_synced
                FROM sync_status WHERE owner = ? AND content_id = ? AND device_id = ?
                """,
                (owner, content_id, device_id)
            )
            row = cursor.fetchone()

            if row is None:
                return None

            return SyncStatus(
                content_id=row["content_id"],
                device_id=row["device_id"],
                latest_version=row["latest_version"],
                last_synced=row["last_synced"],
            )
