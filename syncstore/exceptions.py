"""Custom exception classes for the sync metadata store."""


class SyncStoreException(Exception):
    """
    Base exception class for all store errors.

    Every subclass carries a stable ``code`` naming the error kind.
    """
    code = "SYNC_STORE_ERROR"


class NotAuthorizedError(SyncStoreException):
    """
    Raised when the caller is not the recorded owner of a content item.
    """
    code = "NOT_AUTHORIZED"


class InvalidDeviceError(SyncStoreException):
    """
    Raised when a device_id is not registered to the caller.
    """
    code = "INVALID_DEVICE"


class ContentNotFoundError(SyncStoreException):
    """
    Raised when a content_id does not exist.
    """
    code = "NOT_FOUND"


class ContentAlreadyExistsError(SyncStoreException):
    """
    Raised when the caller already owns a content item with this content_id.
    """
    code = "ALREADY_EXISTS"


class DeviceExistsError(SyncStoreException):
    """
    Raised when registering a device_id already in the caller's list.
    """
    code = "DEVICE_EXISTS"


class DeviceNotFoundError(SyncStoreException):
    """
    Raised when removing a device_id absent from the caller's list.
    """
    code = "DEVICE_NOT_FOUND"


class CapacityExceededError(SyncStoreException):
    """
    Raised when the caller's device list is already full.
    """
    code = "CAPACITY_EXCEEDED"


class InvalidVersionError(SyncStoreException):
    """
    Raised when a reported synced version is below 1.
    """
    code = "INVALID_VERSION"


class VersionNotFoundError(SyncStoreException):
    """
    Raised when a reported synced version is above the item's latest version.
    """
    code = "VERSION_NOT_FOUND"


class InvalidInputError(SyncStoreException):
    """
    Raised when a field violates its length, range or size limit.
    """
    code = "INVALID_INPUT"
