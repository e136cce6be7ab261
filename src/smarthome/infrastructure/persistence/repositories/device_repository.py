"""In-memory repository for devices."""

from threading import RLock

from smarthome.domain.entities.device import Device


class DeviceRepository:
    """Repository for managing Device entities.

    Every method holds the repository lock, so a save of one device is
    atomic with respect to concurrent readers.
    """

    def __init__(self, devices: list[Device] | None = None):
        """Initialize the repository.

        Args:
            devices: Optional devices to start with.
        """
        self._lock = RLock()
        self._devices: dict[str, Device] = {}
        for device in devices or []:
            self._devices[device.id] = device

    def get_by_id(self, device_id: str) -> Device | None:
        """Get a device by its ID.

        Args:
            device_id: Device ID.

        Returns:
            The device if found, None otherwise.
        """
        with self._lock:
            return self._devices.get(device_id)

    def list_all(self) -> list[Device]:
        with self._lock:
            return list(self._devices.values())

    def find_by_location(self, location: str) -> list[Device]:
        """Get all devices in a location, ignoring case.

        Args:
            location: Room or area name.

        Returns:
            Matching devices, possibly empty.
        """
        wanted = (location or "").strip().casefold()
        with self._lock:
            return [d for d in self._devices.values() if d.location.casefold() == wanted]

    def save(self, device: Device) -> Device:
        with self._lock:
            self._devices[device.id] = device
            return device

    def save_all(self, devices: list[Device]) -> list[Device]:
        with self._lock:
            for device in devices:
                self._devices[device.id] = device
            return devices
