"""Domain limits shared across the sync metadata store."""

MAX_DEVICES_PER_USER: int = 100

MAX_DEVICE_ID_LENGTH: int = 36
MAX_DEVICE_NAME_LENGTH: int = 64

MAX_CONTENT_ID_LENGTH: int = 64
MAX_TITLE_LENGTH: int = 128
MAX_CONTENT_TYPE_LENGTH: int = 32
MAX_CHANGE_DESCRIPTION_LENGTH: int = 256

HASH_SIZE_BYTES: int = 32  # SHA-256 sized digest

INITIAL_VERSION: int = 1

SQLITE_MAX_INTEGER: int = 2**63 - 1
