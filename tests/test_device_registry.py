"""Tests for device registration and removal."""

import pytest

from common.constants import MAX_DEVICES_PER_USER
from syncstore.exceptions import (
    CapacityExceededError,
    DeviceExistsError,
    DeviceNotFoundError,
    InvalidInputError,
)


def test_register_device_records_timestamp(store, clock):
    device = store.register_device("alice", "laptop", "Laptop")

    assert device.device_id == "laptop"
    assert device.device_name == "Laptop"
    assert device.added_at >= 1_000
    assert store.get_user_devices("alice") == [device]
    assert store.is_user_device("alice", "laptop")


def test_register_duplicate_device_fails_and_leaves_list(store):
    store.register_device("alice", "laptop", "Laptop")

    with pytest.raises(DeviceExistsError):
        store.register_device("alice", "laptop", "Laptop again")

    devices = store.get_user_devices("alice")
    assert len(devices) == 1
    assert devices[0].device_name == "Laptop"


def test_same_device_id_allowed_for_different_users(store):
    store.register_device("alice", "laptop", "Laptop")
    store.register_device("bob", "laptop", "Laptop")

    assert store.is_user_device("bob", "laptop")
    assert not store.is_user_device("carol", "laptop")


def test_device_list_capacity(store):
    for i in range(MAX_DEVICES_PER_USER):
        store.register_device("alice", f"device-{i}", f"Device {i}")

    with pytest.raises(CapacityExceededError):
        store.register_device("alice", "one-too-many", "Extra")

    assert len(store.get_user_devices("alice")) == MAX_DEVICES_PER_USER
    assert not store.is_user_device("alice", "one-too-many")


def test_capacity_is_per_user(store):
    for i in range(MAX_DEVICES_PER_USER):
        store.register_device("alice", f"device-{i}", f"Device {i}")

    store.register_device("bob", "device-0", "Device 0")
    assert len(store.get_user_devices("bob")) == 1


def test_remove_device(store):
    store.register_device("alice", "laptop", "Laptop")
    store.register_device("alice", "phone", "Phone")

    store.remove_device("alice", "laptop")

    assert [d.device_id for d in store.get_user_devices("alice")] == ["phone"]
    assert not store.is_user_device("alice", "laptop")


def test_remove_unknown_device_fails_and_leaves_list(store):
    store.register_device("alice", "laptop", "Laptop")

    with pytest.raises(DeviceNotFoundError):
        store.remove_device("alice", "phone")

    assert len(store.get_user_devices("alice")) == 1


def test_remove_device_of_other_user_fails(store):
    store.register_device("alice", "laptop", "Laptop")

    with pytest.raises(DeviceNotFoundError):
        store.remove_device("bob", "laptop")

    assert store.is_user_device("alice", "laptop")


def test_removing_device_keeps_its_sync_status(alice_with_laptop):
    store = alice_with_laptop
    store.add_version("alice", "notes.txt", bytes(32), "laptop", "first", 10)

    store.remove_device("alice", "laptop")

    status = store.get_device_sync_info("alice", "notes.txt", "laptop")
    assert status is not None
    assert status.latest_version == 2


@pytest.mark.parametrize("device_id, device_name", [
    ("", "Empty id"),
    ("x" * 37, "Long id"),
    ("laptop", "n" * 65),
])
def test_register_device_field_limits(store, device_id, device_name):
    with pytest.raises(InvalidInputError):
        store.register_device("alice", device_id, device_name)

    assert store.get_user_devices("alice") == []


def test_register_device_accepts_limits_exactly(store):
    store.register_device("alice", "x" * 36, "n" * 64)
    assert store.is_user_device("alice", "x" * 36)


def test_blank_identity_rejected(store):
    with pytest.raises(InvalidInputError):
        store.register_device("", "laptop", "Laptop")


@pytest.mark.parametrize("device_id", ["", "x" * 37])
def test_remove_device_validates_device_id(store, device_id):
    with pytest.raises(InvalidInputError):
        store.remove_device("alice", device_id)
