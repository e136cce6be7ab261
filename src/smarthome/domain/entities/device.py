"""Device entity for smart home appliances."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DeviceType(str, Enum):
    """Supported device types with display metadata."""

    LIGHT = "LIGHT"
    THERMOSTAT = "THERMOSTAT"
    CAMERA = "CAMERA"
    LOCK = "LOCK"
    SENSOR = "SENSOR"

    @property
    def icon(self) -> str:
        return _DEVICE_TYPE_META[self][0]

    @property
    def category(self) -> str:
        return _DEVICE_TYPE_META[self][1]

    @property
    def default_rated_power_watts(self) -> int:
        return _DEVICE_TYPE_META[self][2]


_DEVICE_TYPE_META: dict[DeviceType, tuple[str, str, int]] = {
    DeviceType.LIGHT: ("💡", "Lighting", 12),
    DeviceType.THERMOSTAT: ("🌡️", "Climate", 5),
    DeviceType.CAMERA: ("📷", "Security", 8),
    DeviceType.LOCK: ("🔒", "Security", 2),
    DeviceType.SENSOR: ("🧭", "Sensors", 1),
}


@dataclass
class Device:
    """A controllable device.

    Attributes:
        id: Unique device identifier (e.g. ``living-light-1``).
        name: Display name.
        type: Device type.
        location: Room the device lives in; room-wide actions match on it.
        is_on: Current power state.
        rated_power_watts: Draw when switched on. Defaults from the type.
        ecosystem: Vendor ecosystem label.
        settings: Numeric settings such as ``brightness`` or ``temperature``.
    """

    id: str
    name: str
    type: DeviceType
    location: str
    is_on: bool = False
    rated_power_watts: int | None = None
    ecosystem: str = "LOCAL"
    settings: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate device after initialization."""
        if not self.id:
            raise ValueError("Device ID is required")
        if not self.name:
            raise ValueError("Device name is required")
        if self.rated_power_watts is None:
            self.rated_power_watts = self.type.default_rated_power_watts

    @property
    def info(self) -> str:
        return f"{self.type.icon} {self.name} • {self.location}"

    @property
    def power_watts(self) -> int:
        """Current draw: rated power when on, nothing when off."""
        return self.rated_power_watts if self.is_on else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "info": self.info,
            "type": self.type.value,
            "location": self.location,
            "on": self.is_on,
            "power_watts": self.power_watts,
            "settings": dict(self.settings),
        }
