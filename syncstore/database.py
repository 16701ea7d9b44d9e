"""Database schema, connection and transaction management for SQLite."""

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from common.logging_config import get_logger
from syncstore.config import DATABASE_PATH, DATABASE_TIMEOUT

logger = get_logger(__name__)


SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS devices (
        seq INTEGER PRIMARY KEY AUTOINCREMENT,
        owner TEXT NOT NULL,
        device_id TEXT NOT NULL,
        device_name TEXT NOT NULL,
        added_at INTEGER NOT NULL CHECK(added_at >= 0),
        UNIQUE(owner, device_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS content (
        owner TEXT NOT NULL,
        content_id TEXT NOT NULL,
        title TEXT NOT NULL,
        content_type TEXT NOT NULL,
        created_at INTEGER NOT NULL,
        last_modified INTEGER NOT NULL,
        size_bytes INTEGER NOT NULL CHECK(size_bytes >= 0),
        latest_version INTEGER NOT NULL CHECK(latest_version >= 1),
        PRIMARY KEY(owner, content_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS versions (
        owner TEXT NOT NULL,
        content_id TEXT NOT NULL,
        version INTEGER NOT NULL,
        hash BLOB NOT NULL CHECK(length(hash) = 32),
        timestamp INTEGER NOT NULL,
        device_id TEXT NOT NULL,
        change_description TEXT NOT NULL,
        size_bytes INTEGER NOT NULL CHECK(size_bytes >= 0),
        PRIMARY KEY(owner, content_id, version)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS sync_status (
        owner TEXT NOT NULL,
        content_id TEXT NOT NULL,
        device_id TEXT NOT NULL,
        latest_version INTEGER NOT NULL CHECK(latest_version >= 1),
        last_synced INTEGER NOT NULL,
        PRIMARY KEY(owner, content_id, device_id)
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_content_content_id ON content(content_id)
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_devices_owner ON devices(owner, seq)
    """,
)


class Database:
    """
    Handle on one SQLite database file.

    Write transactions are serialized process-wide by a lock and across
    processes by SQLite's reserved lock (BEGIN IMMEDIATE).
    """

    _write_lock = threading.Lock()

    def __init__(self, path: Optional[str] = None, timeout: float = DATABASE_TIMEOUT):
        self.path = path or DATABASE_PATH
        self.timeout = timeout

    def init_schema(self) -> None:
        """
        Create tables and indexes if they don't exist.
        """
        db_path = Path(self.path)
        db_path.parent.mkdir(parents=True, exist_ok=True)

        with self.connect() as conn:
            cursor = conn.cursor()
            for statement in SCHEMA_STATEMENTS:
                cursor.execute(statement)
            conn.commit()
        logger.info(f"Database schema ready [path={self.path}]")

    @contextmanager
    def connect(self) -> Generator[sqlite3.Connection, None, None]:
        """
        Context manager for database connections.
        """
        conn = sqlite3.connect(self.path, timeout=self.timeout)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    @contextmanager
    def connection(self, conn: Optional[sqlite3.Connection] = None) -> Generator[sqlite3.Connection, None, None]:
        """
        Reuse the caller's connection when one is given, otherwise open one
        that commits its own writes.
        """
        if conn is not None:
            yield conn
            return
        with self.connect() as own_conn:
            yield own_conn
            if own_conn.in_transaction:
                own_conn.commit()

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """
        Run a unit of work that commits on success and rolls back on any error.

        Must not be nested.
        """
        with self._write_lock:
            with self.connect() as conn:
                conn.execute("BEGIN IMMEDIATE")
                try:
                    yield conn
                    conn.commit()
                except Exception:
                    conn.rollback()
                    raise
