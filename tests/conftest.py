"""Shared pytest fixtures for all tests."""

import pytest

from syncstore.clock import ManualClock
from syncstore.database import Database
from syncstore.store import MetadataStore


@pytest.fixture
def database(tmp_path):
    """
    Create a temporary database with the full schema.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Database backed by a file in tmp_path
    """
    db = Database(str(tmp_path / "syncstore.db"))
    db.init_schema()
    return db


@pytest.fixture
def clock():
    """Clock that ticks by one on every reading."""
    return ManualClock(start=1_000, step=1)


@pytest.fixture
def store(database, clock):
    return MetadataStore(database, clock)


@pytest.fixture
def alice_with_laptop(store):
    """
    Store where 'alice' owns device 'laptop' and content 'notes.txt'.
    """
    store.register_device("alice", "laptop", "Alice's laptop")
    store.create_content("alice", "notes.txt", "Notes", "text/plain", 100)
    return store
