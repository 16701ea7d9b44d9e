"""Content, version and sync status API routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from syncstore.auth import get_current_identity, get_store
from syncstore.exceptions import InvalidInputError
from syncstore.repositories.content_repository import ContentItem
from syncstore.schemas.content import (
    AddVersionRequest,
    AddVersionResponse,
    ContentExistsResponse,
    ContentInfoResponse,
    CreateContentRequest,
    SyncStatusResponse,
    UpdateContentRequest,
    UpdateSyncStatusRequest,
    VersionDetailsResponse
)
from syncstore.store import MetadataStore

router = APIRouter(prefix="/content", tags=["Content"])


def _content_response(item: ContentItem) -> ContentInfoResponse:
    return ContentInfoResponse(
        content_id=item.content_id,
        owner=item.owner,
        title=item.title,
        content_type=item.content_type,
        created_at=item.created_at,
        last_modified=item.last_modified,
        size_bytes=item.size_bytes,
        latest_version=item.latest_version,
    )


@router.post("", response_model=ContentInfoResponse, status_code=status.HTTP_201_CREATED)
async def create_content(
    request: CreateContentRequest,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    """
    Create a content item owned by the caller at version 1.

    Raises:
        - 400: Field limits violated
        - 409: Caller already owns this content_id
    """
    item = store.create_content(
        identity, request.content_id, request.title, request.content_type, request.size_bytes
    )
    return _content_response(item)


@router.put("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_content(
    content_id: str,
    request: UpdateContentRequest,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    """
    Replace title, content_type and size_bytes of the caller's content item.

    Raises:
        - 403: Content belongs to another owner
        - 404: Content does not exist
    """
    store.update_content(identity, content_id, request.title, request.content_type, request.size_bytes)


@router.delete("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_content(
    content_id: str,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    """
    Delete the caller's catalog record. Versions and sync status stay readable.

    Raises:
        - 403: Caller does not own this content_id
    """
    store.delete_content(identity, content_id)


@router.post("/{content_id}/versions", response_model=AddVersionResponse, status_code=status.HTTP_201_CREATED)
async def add_version(
    content_id: str,
    request: AddVersionRequest,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    """
    Append a version produced by one of the caller's devices.

    Parameters:
        - hash: Hex encoded 32-byte content digest
        - device_id: Producing device, must be registered to the caller
        - change_description: Free text
        - size_bytes: Size of the new content

    Returns:
        - version: The new version number

    Raises:
        - 400: Malformed hash or field limits violated
        - 403: Caller does not own the content, or device not registered
        - 404: Content does not exist
    """
    try:
        content_hash = bytes.fromhex(request.hash)
    except ValueError:
        raise InvalidInputError("hash must be hex encoded")

    version = store.add_version(
        identity, content_id, content_hash, request.device_id, request.change_description, request.size_bytes
    )
    return AddVersionResponse(version=version)


@router.put("/{content_id}/sync/{device_id}", response_model=SyncStatusResponse)
async def update_sync_status(
    content_id: str,
    device_id: str,
    request: UpdateSyncStatusRequest,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    """
    Record that a device has caught up to synced_version.

    Raises:
        - 400: synced_version below 1
        - 403: Caller does not own the content, or device not registered
        - 404: synced_version above the latest version
    """
    sync_status = store.update_sync_status(identity, content_id, device_id, request.synced_version)
    return SyncStatusResponse(
        content_id=sync_status.content_id,
        device_id=sync_status.device_id,
        latest_version=sync_status.latest_version,
        last_synced=sync_status.last_synced,
    )


@router.get("/{owner}/{content_id}", response_model=ContentInfoResponse)
async def get_content_info(
    owner: str,
    content_id: str,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    item = store.get_content_info(content_id, owner)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content not found")
    return _content_response(item)


@router.get("/{owner}/{content_id}/exists", response_model=ContentExistsResponse)
async def content_exists(
    owner: str,
    content_id: str,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    return ContentExistsResponse(exists=store.content_exists(content_id, owner))


@router.get("/{owner}/{content_id}/versions/{version}", response_model=VersionDetailsResponse)
async def get_version_details(
    owner: str,
    content_id: str,
    version: int,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    record = store.get_version_details(owner, content_id, version)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Version not found")
    return VersionDetailsResponse(
        content_id=record.content_id,
        version=record.version,
        hash=record.hash.hex(),
        timestamp=record.timestamp,
        device_id=record.device_id,
        change_description=record.change_description,
        size_bytes=record.size_bytes,
    )


@router.get("/{owner}/{content_id}/sync/{device_id}", response_model=SyncStatusResponse)
async def get_device_sync_info(
    owner: str,
    content_id: str,
    device_id: str,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    sync_status = store.get_device_sync_info(owner, content_id, device_id)
    if sync_status is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sync status not found")
    return SyncStatusResponse(
        content_id=sync_status.content_id,
        device_id=sync_status.device_id,
        latest_version=sync_status.latest_version,
        last_synced=sync_status.last_synced,
    )
