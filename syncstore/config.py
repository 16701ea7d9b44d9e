"""Configuration settings for the sync metadata store."""

import os


DATABASE_PATH = os.environ.get("SYNCSTORE_DATABASE_PATH", "/app/data/syncstore.db")

DATABASE_TIMEOUT = float(os.environ.get("SYNCSTORE_DB_TIMEOUT", "5.0"))

SYNCSTORE_HOST = os.environ.get("SYNCSTORE_HOST", "0.0.0.0")

SYNCSTORE_PORT = int(os.environ.get("SYNCSTORE_PORT", "8000"))
