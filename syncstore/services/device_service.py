"""Device registry service for business logic."""

from typing import List

from common.constants import MAX_DEVICES_PER_USER
from common.logging_config import get_logger
from syncstore import validation
from syncstore.clock import Clock
from syncstore.database import Database
from syncstore.exceptions import (
    CapacityExceededError,
    DeviceExistsError,
    DeviceNotFoundError,
    SyncStoreException,
)
from syncstore.repositories.device_repository import Device, DeviceRepository

logger = get_logger(__name__)


class DeviceService:
    def __init__(self, database: Database, clock: Clock):
        self.database = database
        self.clock = clock
        self.device_repo = DeviceRepository(database)

    def register_device(self, identity: str, device_id: str, device_name: str) -> Device:
        logger.info(f"Registering device {device_id} [owner={identity}]")
        validation.require_identity(identity)
        validation.require_device_id(device_id)
        validation.require_device_name(device_name)

        try:
            with self.database.transaction() as conn:
                if self.device_repo.has_device(identity, device_id, conn=conn):
                    logger.warning(f"Device already registered [device_id={device_id}] [owner={identity}]")
                    raise DeviceExistsError(f"Device {device_id} is already registered")

                if self.device_repo.count_devices(identity, conn=conn) >= MAX_DEVICES_PER_USER:
                    logger.warning(f"Device list full [owner={identity}]")
                    raise CapacityExceededError(
                        f"Device list is limited to {MAX_DEVICES_PER_USER} entries"
                    )

                device = self.device_repo.add_device(
                    identity, device_id, device_name, self.clock.now(), conn=conn
                )
        except SyncStoreException:
            raise
        except Exception as e:
            logger.error(f"Failed to register device {device_id}: {e} [owner={identity}]", exc_info=True)
            raise

        logger.info(f"Device registered [device_id={device_id}] [owner={identity}]")
        return device

    def remove_device(self, identity: str, device_id: str) -> None:
        """
        Remove a device from the caller's list.

        Sync status rows naming the device are left in place.
        """
        logger.info(f"Removing device {device_id} [owner={identity}]")
        validation.require_identity(identity)
        validation.require_device_id(device_id)

        with self.database.transaction() as conn:
            if not self.device_repo.remove_device(identity, device_id, conn=conn):
                logger.warning(f"Device not found [device_id={device_id}] [owner={identity}]")
                raise DeviceNotFoundError(f"Device {device_id} is not registered")

        logger.info(f"Device removed [device_id={device_id}] [owner={identity}]")

    def is_user_device(self, identity: str, device_id: str) -> bool:
        return self.device_repo.has_device(identity, device_id)

    def get_user_devices(self, identity: str) -> List[Device]:
        return self.device_repo.list_devices(identity)
