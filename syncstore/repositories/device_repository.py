"""Device repository for database operations."""

from dataclasses import dataclass
from typing import List

from common.logging_config import get_logger
from syncstore.database import Database

logger = get_logger(__name__)


@dataclass(frozen=True)
class Device:
    device_id: str
    device_name: str
    added_at: int


class DeviceRepository:
    def __init__(self, database: Database):
        self.database = database

    def add_device(self, owner: str, device_id: str, device_name: str, added_at: int, conn=None) -> Device:
        logger.debug(f"Inserting device [device_id={device_id}] [owner={owner}]")
        with self.database.connection(conn) as conn:
            conn.execute(
                """
                INSERT INTO devices (owner, device_id, device_name, added_at)
                VALUES (?, ?, ?, ?)
                """,
                (owner, device_id, device_name, added_at)
            )
        return Device(device_id=device_id, device_name=device_name, added_at=added_at)

    def remove_device(self, owner: str, device_id: str, conn=None) -> bool:
        logger.debug(f"Removing device [device_id={device_id}] [owner={owner}]")
        with self.database.connection(conn) as conn:
            cursor = conn.execute(
                "DELETE FROM devices WHERE owner = ? AND device_id = ?",
                (owner, device_id)
            )
            return cursor.rowcount > 0

    def has_device(self, owner: str, device_id: str, conn=None) -> bool:
        with self.database.connection(conn) as conn:
            cursor = conn.execute(
                "SELECT 1 FROM devices WHERE owner = ? AND device_id = ?",
                (owner, device_id)
            )
            return cursor.fetchone() is not None

    def count_devices(self, owner: str, conn=None) -> int:
        with self.database.connection(conn) as conn:
            cursor = conn.execute("SELECT COUNT(*) FROM devices WHERE owner = ?", (owner,))
            return cursor.fetchone()[0]

    def list_devices(self, owner: str, conn=None) -> List[Device]:
        """
        Return the owner's devices in registration order.
        """
        with self.database.connection(conn) as conn:
            cursor = conn.execute(
                """
                SELECT device_id, device_name, added_at
                FROM devices WHERE owner = ?
                ORDER BY seq
                """,
                (owner,)
            )
            return [
                Device(
                    device_id=row["device_id"],
                    device_name=row["device_name"],
                    added_at=row["added_at"],
                )
                for row in cursor.fetchall()
            ]
