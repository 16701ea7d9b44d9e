"""Content catalog repository for database operations."""

from dataclasses import dataclass
from typing import Optional

from common.logging_config import get_logger
from syncstore.database import Database

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContentItem:
    content_id: str
    owner: str
    title: str
    content_type: str
    created_at: int
    last_modified: int
    size_bytes: int
    latest_version: int


def _row_to_content(row) -> ContentItem:
    return ContentItem(
        content_id=row["content_id"],
        owner=row["owner"],
        title=row["title"],
        content_type=row["content_type"],
        created_at=row["created_at"],
        last_modified=row["last_modified"],
        size_bytes=row["size_bytes"],
        latest_version=row["latest_version"],
    )


class ContentRepository:
    def __init__(self, database: Database):
        self.database = database

    def create_content(self, item: ContentItem, conn=None) -> ContentItem:
        logger.debug(f"Inserting content [content_id={item.content_id}] [owner={item.owner}]")
        with self.database.connection(conn) as conn:
            conn.execute(
                """
                INSERT INTO content (owner, content_id, title, content_type, created_at,
                                     last_modified, size_bytes, latest_version)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (item.owner, item.content_id, item.title, item.content_type, item.created_at,
                 item.last_modified, item.size_bytes, item.latest_version)
            )
        return item

    def get_content(self, owner: str, content_id: str, conn=None) -> Optional[ContentItem]:
        with self.database.connection(conn) as conn:
            cursor = conn.execute(
                """
                SELECT owner, content_id, title, content_type, created_at,
                       last_modified, size_bytes, latest_version
                FROM content WHERE owner = ? AND content_id = ?
                """,
                (owner, content_id)
            )
            row = cursor.fetchone()

            if row is None:
                return None

            return _row_to_content(row)

    def content_id_in_use(self, content_id: str, conn=None) -> bool:
        """
        Check whether any owner holds a catalog row for content_id.
        """
        with self.database.connection(conn) as conn:
            cursor = conn.execute("SELECT 1 FROM content WHERE content_id = ? LIMIT 1", (content_id,))
            return cursor.fetchone() is not None

    def update_metadata(
        self,
        owner: str,
        content_id: str,
        title: str,
        content_type: str,
        size_bytes: int,
        last_modified: int,
        conn=None
    ) -> None:
        logger.debug(f"Updating content metadata [content_id={content_id}] [owner={owner}]")
        with self.database.connection(conn) as conn:
            conn.execute(
                """
                UPDATE content
                SET title = ?, content_type = ?, size_bytes = ?, last_modified = ?
                WHERE owner = ? AND content_id = ?
                """,
                (title, content_type, size_bytes, last_modified, owner, content_id)
            )

    def advance_version(
        self,
        owner: str,
        content_id: str,
        version: int,
        size_bytes: int,
        last_modified: int,
        conn=None
    ) -> None:
        """
        Move latest_version forward; the WHERE clause refuses to move it back.
        """
        with self.database.connection(conn) as conn:
            cursor = conn.execute(
                """
                UPDATE content
                SET latest_version = ?, size_bytes = ?, last_modified = ?
                WHERE owner = ? AND content_id = ? AND latest_version < ?
                """,
                (version, size_bytes, last_modified, owner, content_id, version)
            )
            if cursor.rowcount != 1:
                raise RuntimeError(
                    f"latest_version of {content_id} could not advance to {version} [owner={owner}]"
                )

    def delete_content(self, owner: str, content_id: str, conn=None) -> bool:
        logger.debug(f"Deleting content [content_id={content_id}] [owner={owner}]")
        with self.database.connection(conn) as conn:
            cursor = conn.execute(
                "DELETE FROM content WHERE owner = ? AND content_id = ?",
                (owner, content_id)
            )
            return cursor.rowcount > 0
