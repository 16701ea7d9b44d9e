"""Pydantic schemas for device registry endpoints."""

from typing import List
from pydantic import BaseModel


class RegisterDeviceRequest(BaseModel):
    """Request model for device registration."""
    device_id: str
    device_name: str


class DeviceResponse(BaseModel):
    """Response model for a registered device."""
    device_id: str
    device_name: str
    added_at: int


class ListDevicesResponse(BaseModel):
    """Response model for the caller's device list."""
    devices: List[DeviceResponse]
