"""Context in which structured rules check triggers and run actions.

Trigger and condition checks are a fixed dispatch on the pair's type, not
the expression interpreter used for stored rule text.
"""

from collections.abc import Callable
from datetime import datetime, time
from typing import Any

from smarthome.core.logging import get_logger
from smarthome.domain.services.device_service import DeviceService

logger = get_logger(__name__)


class RuleContext:
    """Sensor data, clock and device access for one round of rule checks.

    Attributes:
        data: Sensor readings, e.g. ``{"motion_hall": True, "temperature": 21.5}``.
        device_service: Device registry used for actions and the home mode.
        clock: Returns the current wall-clock time.
        notifications: Messages produced by ``NOTIFY`` actions.
    """

    def __init__(
        self,
        device_service: DeviceService,
        data: dict[str, Any] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.device_service = device_service
        self.data: dict[str, Any] = dict(data or {})
        self.clock = clock
        self.notifications: list[str] = []

    def now(self) -> datetime:
        return self.clock()

    def set_data(self, key: str, value: Any) -> None:
        self.data[key] = value

    def get_data(self, key: str) -> Any:
        return self.data.get(key)

    def check_trigger(self, trigger_type: str, value: str) -> bool:
        """Check a trigger; unknown trigger types never fire."""
        if trigger_type == "MOTION_DETECTED":
            return bool(self.data.get(f"motion_{value}"))
        if trigger_type == "DOOR_OPENED":
            return bool(self.data.get(f"door_{value}"))
        if trigger_type in ("TEMP_ABOVE", "TEMP_BELOW"):
            current = self.data.get("temperature")
            if current is None:
                return False
            if trigger_type == "TEMP_ABOVE":
                return float(current) > float(value)
            return float(current) < float(value)
        return False

    def check_condition(self, condition_type: str, value: str) -> bool:
        """Check a condition; unknown condition types are satisfied."""
        if condition_type == "TIME_AFTER":
            return self.now().time() > time.fromisoformat(value)
        if condition_type == "TIME_BEFORE":
            return self.now().time() < time.fromisoformat(value)
        if condition_type == "MODE_EQUALS":
            return value == self.device_service.get_home_mode().value
        return True

    def execute_action(self, action_type: str, value: str) -> bool:
        """Run one action.

        Missing devices and unknown action types are logged and skipped.

        Returns:
            True if the action was applied.
        """
        if action_type in ("TURN_ON", "TURN_OFF"):
            if not self._device_exists(value):
                return False
            self.device_service.control_device(value, action_type == "TURN_ON")
            return True

        if action_type in ("SET_BRIGHTNESS", "SET_TEMPERATURE"):
            device_id, _, amount = value.partition(":")
            if not self._device_exists(device_id):
                return False
            setting = "brightness" if action_type == "SET_BRIGHTNESS" else "temperature"
            self.device_service.set_device_setting(device_id, setting, int(amount))
            return True

        if action_type == "NOTIFY":
            self.notifications.append(value)
            logger.info("Notification", message=value)
            return True

        logger.warning("Unknown action type", action_type=action_type, value=value)
        return False

    def _device_exists(self, device_id: str) -> bool:
        if self.device_service.device_repository.get_by_id(device_id) is None:
            logger.warning("Action skipped: device not registered", device_id=device_id)
            return False
        return True
