import pytest

from smarthome.core.exceptions import ErrorKind, ValidationError
from smarthome.domain.entities.automation_rule import AutomationRule
from smarthome.domain.entities.device import Device, DeviceType
from smarthome.domain.entities.home_mode import HomeMode
from smarthome.domain.entities.scene import Scene


class TestDevice:
    def test_rated_power_defaults_from_type(self):
        device = Device(id="l1", name="Lamp", type=DeviceType.LIGHT, location="Hall")
        assert device.rated_power_watts == 12
        assert device.power_watts == 0

        device.is_on = True
        assert device.power_watts == 12

    def test_info_and_dict(self):
        device = Device(id="t1", name="Thermostat", type=DeviceType.THERMOSTAT, location="Hall")
        data = device.to_dict()

        assert device.info == f"{DeviceType.THERMOSTAT.icon} Thermostat • Hall"
        assert data["id"] == "t1"
        assert data["type"] == "THERMOSTAT"
        assert data["on"] is False
        assert data["settings"] == {}

    def test_id_required(self):
        with pytest.raises(ValueError):
            Device(id="", name="Lamp", type=DeviceType.LIGHT, location="Hall")

    def test_type_metadata(self):
        assert DeviceType.LOCK.category == "Security"
        assert DeviceType.SENSOR.icon == "🧭"


class TestHomeMode:
    def test_parse_ignores_case_and_whitespace(self):
        assert HomeMode.parse(" night ") is HomeMode.NIGHT

    def test_parse_unknown(self):
        with pytest.raises(ValidationError, match="Invalid home mode: PARTY") as exc_info:
            HomeMode.parse("PARTY")
        assert exc_info.value.kind is ErrorKind.VALIDATION


class TestSceneAndRule:
    def test_scene_name_required(self):
        with pytest.raises(ValueError):
            Scene(name=" ")

    def test_scene_device_count(self):
        assert Scene(name="Evening", device_states={"a": True, "b": False}).device_count == 2

    def test_rule_to_dict(self):
        rule = AutomationRule(name="r", trigger_condition="motion", action_script="on(a)", id=3)
        data = rule.to_dict()

        assert data["id"] == 3
        assert data["enabled"] is True
        assert data["priority"] == 5
        assert data["last_triggered"] is None
