"""Device registry API routes."""

from fastapi import APIRouter, Depends, status

from syncstore.auth import get_current_identity, get_store
from syncstore.schemas.devices import DeviceResponse, ListDevicesResponse, RegisterDeviceRequest
from syncstore.store import MetadataStore

router = APIRouter(prefix="/devices", tags=["Devices"])


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def register_device(
    request: RegisterDeviceRequest,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    """
    Register a device for the caller.

    Raises:
        - 400: device_id or device_name too long
        - 409: Device already registered, or device list full
    """
    device = store.register_device(identity, request.device_id, request.device_name)
    return DeviceResponse(
        device_id=device.device_id,
        device_name=device.device_name,
        added_at=device.added_at,
    )


@router.get("", response_model=ListDevicesResponse)
async def list_devices(
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    devices = store.get_user_devices(identity)
    return ListDevicesResponse(devices=[
        DeviceResponse(device_id=d.device_id, device_name=d.device_name, added_at=d.added_at)
        for d in devices
    ])


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_device(
    device_id: str,
    identity: str = Depends(get_current_identity),
    store: MetadataStore = Depends(get_store)
):
    """
    Remove a device from the caller's list.

    Raises:
        - 404: Device not registered
    """
    store.remove_device(identity, device_id)
