"""Field limit checks applied before any store access."""

from common.constants import (
    HASH_SIZE_BYTES,
    MAX_CHANGE_DESCRIPTION_LENGTH,
    MAX_CONTENT_ID_LENGTH,
    MAX_CONTENT_TYPE_LENGTH,
    MAX_DEVICE_ID_LENGTH,
    MAX_DEVICE_NAME_LENGTH,
    MAX_TITLE_LENGTH,
    SQLITE_MAX_INTEGER,
)
from syncstore.exceptions import InvalidInputError


def require_identity(identity: str) -> None:
    if not isinstance(identity, str) or not identity:
        raise InvalidInputError("Caller identity is required")


def _require_text(field: str, value: str, max_length: int, allow_empty: bool = True) -> None:
    if not isinstance(value, str):
        raise InvalidInputError(f"{field} must be a string")
    if not allow_empty and not value:
        raise InvalidInputError(f"{field} cannot be empty")
    if len(value) > max_length:
        raise InvalidInputError(f"{field} exceeds {max_length} characters")


def require_device_id(device_id: str) -> None:
    _require_text("device_id", device_id, MAX_DEVICE_ID_LENGTH, allow_empty=False)


def require_device_name(device_name: str) -> None:
    _require_text("device_name", device_name, MAX_DEVICE_NAME_LENGTH)


def require_content_id(content_id: str) -> None:
    _require_text("content_id", content_id, MAX_CONTENT_ID_LENGTH, allow_empty=False)


def require_content_fields(title: str, content_type: str, size_bytes: int) -> None:
    _require_text("title", title, MAX_TITLE_LENGTH)
    _require_text("content_type", content_type, MAX_CONTENT_TYPE_LENGTH)
    require_size(size_bytes)


def require_change_description(change_description: str) -> None:
    _require_text("change_description", change_description, MAX_CHANGE_DESCRIPTION_LENGTH)


def require_size(size_bytes: int) -> None:
    if isinstance(size_bytes, bool) or not isinstance(size_bytes, int):
        raise InvalidInputError("size_bytes must be an integer")
    if size_bytes < 0:
        raise InvalidInputError("size_bytes cannot be negative")
    if size_bytes > SQLITE_MAX_INTEGER:
        raise InvalidInputError(f"size_bytes exceeds {SQLITE_MAX_INTEGER}")


def require_hash(content_hash: bytes) -> None:
    if not isinstance(content_hash, (bytes, bytearray)):
        raise InvalidInputError("hash must be bytes")
    if len(content_hash) != HASH_SIZE_BYTES:
        raise InvalidInputError(f"hash must be exactly {HASH_SIZE_BYTES} bytes, got {len(content_hash)}")
