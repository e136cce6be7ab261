import pytest

from smarthome.core.exceptions import NotFoundError
from smarthome.domain.entities.device import Device, DeviceType
from smarthome.domain.entities.home_mode import HomeMode


class TestQueries:
    def test_list_devices_sorted_by_location_then_name(self, device_service):
        ids = [d.id for d in device_service.list_devices()]
        assert ids == [
            "bedroom-light-1",
            "front-door-lock",
            "hall-thermostat",
            "living-light-1",
            "living-lamp-2",
        ]

    def test_get_missing_device(self, device_service):
        with pytest.raises(NotFoundError, match="Device not found: ghost"):
            device_service.get_device("ghost")

    def test_locations(self, device_service):
        assert device_service.locations() == ["Bedroom", "Entrance", "Hall", "Living Room"]

    def test_default_home_mode(self, device_service):
        assert device_service.get_home_mode() is HomeMode.NORMAL


class TestCommands:
    def test_turn_on_and_off(self, device_service):
        device_service.turn_on("living-light-1")
        assert device_service.is_on("living-light-1") is True

        device_service.turn_off("living-light-1")
        assert device_service.is_on("living-light-1") is False

    def test_control_room_ignores_case(self, device_service):
        devices = device_service.control_room("living room", True)

        assert {d.id for d in devices} == {"living-light-1", "living-lamp-2"}
        assert all(device_service.is_on(d.id) for d in devices)
        assert device_service.is_on("bedroom-light-1") is False

    def test_control_unknown_room_is_empty(self, device_service):
        assert device_service.control_room("Garage", True) == []

    def test_set_device_setting(self, device_service):
        device = device_service.set_device_setting("living-light-1", "brightness", 40)
        assert device.settings == {"brightness": 40}

    def test_set_home_mode(self, device_service, mode_store):
        device_service.set_home_mode(HomeMode.AWAY)
        assert mode_store.get() is HomeMode.AWAY

    def test_register_device(self, device_service):
        device_service.register_device(
            Device(id="garage-cam", name="Camera", type=DeviceType.CAMERA, location="Garage")
        )
        assert device_service.get_device("garage-cam").location == "Garage"
