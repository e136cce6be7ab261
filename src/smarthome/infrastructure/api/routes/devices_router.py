"""API routes for devices and the home mode."""

from fastapi import APIRouter

from smarthome.infrastructure.api.dependencies import DeviceServiceDep
from smarthome.infrastructure.api.schemas import (
    DeviceControlRequest,
    HomeModeResponse,
    HomeModeUpdate,
)

router = APIRouter()


@router.get("")
async def list_devices(device_service: DeviceServiceDep):
    """List devices sorted by location and name."""
    return [device.to_dict() for device in device_service.list_devices()]


@router.get("/locations")
async def list_locations(device_service: DeviceServiceDep):
    return device_service.locations()


@router.get("/mode", response_model=HomeModeResponse)
async def get_home_mode(device_service: DeviceServiceDep):
    return HomeModeResponse(mode=device_service.get_home_mode())


@router.put("/mode", response_model=HomeModeResponse)
async def set_home_mode(mode_in: HomeModeUpdate, device_service: DeviceServiceDep):
    return HomeModeResponse(mode=device_service.set_home_mode(mode_in.mode))


@router.post("/rooms/{room}/control")
async def control_room(room: str, control_in: DeviceControlRequest, device_service: DeviceServiceDep):
    """Switch every device in a room."""
    devices = device_service.control_room(room, control_in.on)
    return {"room": room, "devices": [device.to_dict() for device in devices]}


@router.get("/{device_id}")
async def get_device(device_id: str, device_service: DeviceServiceDep):
    return device_service.get_device(device_id).to_dict()


@router.post("/{device_id}/control")
async def control_device(
    device_id: str, control_in: DeviceControlRequest, device_service: DeviceServiceDep
):
    return device_service.control_device(device_id, control_in.on).to_dict()
