"""Version ledger repository for database operations."""

from dataclasses import dataclass
from typing import Optional

from common.constants import SQLITE_MAX_INTEGER
from common.logging_config import get_logger
from syncstore.database import Database

logger = get_logger(__name__)


@dataclass(frozen=True)
class VersionRecord:
    content_id: str
    version: int
    hash: bytes
    timestamp: int
    device_id: str
    change_description: str
    size_bytes: int


class VersionRepository:
    def __init__(self, database: Database):
        self.database = database

    def insert_version(self, owner: str, record: VersionRecord, conn=None) -> VersionRecord:
        """
        Append a ledger row. Rows are never replaced or updated.
        """
        logger.debug(
            f"Appending version {record.version} [content_id={record.content_id}] [owner={owner}]"
        )
        with self.database.connection(conn) as conn:
            conn.execute(
                """
                INSERT INTO versions (owner, content_id, version, hash, timestamp,
                                      device_id, change_description, size_bytes)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (owner, record.content_id, record.version, record.hash, record.timestamp,
                 record.device_id, record.change_description, record.size_bytes)
            )
        return record

    def get_version(self, owner: str, content_id: str, version: int, conn=None) -> Optional[VersionRecord]:
        if not 1 <= version <= SQLITE_MAX_INTEGER:
            return None

        with self.database.connection(conn) as conn:
            cursor = conn.execute(
                """
                SELECT content_id, version, hash, timestamp, device_id, change_description, size_bytes
                FROM versions WHERE owner = ? AND content_id = ? AND version = ?
                """,
                (owner, content_id, version)
            )
            row = cursor.fetchone()

            if row is None:
                return None

            return VersionRecord(
                content_id=row["content_id"],
                version=row["version"],
                hash=bytes(row["hash"]),
                timestamp=row["timestamp"],
                device_id=row["device_id"],
                change_description=row["change_description"],
                size_bytes=row["size_bytes"],
            )

    def has_history(self, owner: str, content_id: str, conn=None) -> bool:
        """
        Check whether ledger rows exist for (owner, content_id), live or deleted.
        """
        with self.database.connection(conn) as conn:
            cursor = conn.execute(
                "SELECT 1 FROM versions WHERE owner = ? AND content_id = ? LIMIT 1",
                (owner, content_id)
            )
            return cursor.fetchone() is not None
