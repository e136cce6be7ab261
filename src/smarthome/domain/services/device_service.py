"""Device registry service.

Controls device power state and settings, and owns the home mode. The
repository is the single source of truth for device state.
"""

from smarthome.core.exceptions import NotFoundError
from smarthome.core.logging import get_logger
from smarthome.domain.entities.device import Device
from smarthome.domain.entities.home_mode import HomeMode
from smarthome.infrastructure.persistence.repositories import DeviceRepository, HomeModeStore

logger = get_logger(__name__)


class DeviceService:
    """Service for querying and controlling devices."""

    def __init__(self, device_repository: DeviceRepository, mode_store: HomeModeStore):
        """Initialize the service.

        Args:
            device_repository: Store holding the devices.
            mode_store: Store holding the current home mode.
        """
        self.device_repository = device_repository
        self.mode_store = mode_store

    # Queries

    def list_devices(self) -> list[Device]:
        """List devices sorted by location, then name."""
        return sorted(self.device_repository.list_all(), key=lambda d: (d.location, d.name))

    def get_device(self, device_id: str) -> Device:
        """Get a device by ID.

        Raises:
            NotFoundError: If no device has this ID.
        """
        device = self.device_repository.get_by_id(device_id)
        if device is None:
            raise NotFoundError("Device", device_id)
        return device

    def is_on(self, device_id: str) -> bool:
        return self.get_device(device_id).is_on

    def locations(self) -> list[str]:
        """Distinct non-blank locations, sorted case-insensitively."""
        names = {d.location for d in self.device_repository.list_all() if d.location.strip()}
        return sorted(names, key=str.casefold)

    def get_home_mode(self) -> HomeMode:
        return self.mode_store.get()

    # Commands

    def register_device(self, device: Device) -> Device:
        logger.info("Device registered", device_id=device.id, info=device.info)
        return self.device_repository.save(device)

    def control_device(self, device_id: str, turn_on: bool) -> Device:
        """Switch a device on or off.

        Raises:
            NotFoundError: If no device has this ID.
        """
        device = self.get_device(device_id)
        device.is_on = turn_on
        self.device_repository.save(device)
        logger.info("Device switched", device_id=device_id, on=turn_on)
        return device

    def turn_on(self, device_id: str) -> Device:
        return self.control_device(device_id, True)

    def turn_off(self, device_id: str) -> Device:
        return self.control_device(device_id, False)

    def control_room(self, room: str, turn_on: bool) -> list[Device]:
        """Switch every device whose location matches ``room`` (ignoring case)."""
        devices = self.device_repository.find_by_location(room)
        for device in devices:
            device.is_on = turn_on
        self.device_repository.save_all(devices)
        logger.info("Room switched", room=room, on=turn_on, device_count=len(devices))
        return devices

    def set_device_setting(self, device_id: str, setting: str, value: int) -> Device:
        """Store a numeric setting such as brightness or temperature.

        Raises:
            NotFoundError: If no device has this ID.
        """
        device = self.get_device(device_id)
        device.settings[setting] = value
        self.device_repository.save(device)
        logger.info("Device setting changed", device_id=device_id, setting=setting, value=value)
        return device

    def set_home_mode(self, mode: HomeMode) -> HomeMode:
        previous = self.mode_store.set(mode)
        logger.info("Home mode changed", previous=previous.value, mode=mode.value)
        return mode
