"""Pytest configuration for all tests."""

import pytest
import pytest_asyncio
import structlog
from httpx import ASGITransport, AsyncClient

from smarthome.core.config import Settings, get_settings
from smarthome.domain.entities.device import Device, DeviceType
from smarthome.domain.services import (
    ActionDispatcher,
    DeviceService,
    RuleEngine,
    RuleService,
    SceneService,
)
from smarthome.infrastructure.api.app import create_app
from smarthome.infrastructure.api.container import build_container
from smarthome.infrastructure.persistence.repositories import (
    AutomationRuleRepository,
    DeviceRepository,
    HomeModeStore,
    SceneRepository,
)


def make_devices() -> list[Device]:
    """A small home: two living-room lights, a bedroom light, a thermostat and a lock."""
    return [
        Device(id="living-light-1", name="Ceiling Light", type=DeviceType.LIGHT, location="Living Room"),
        Device(id="living-lamp-2", name="Floor Lamp", type=DeviceType.LIGHT, location="Living Room"),
        Device(id="bedroom-light-1", name="Bedside Light", type=DeviceType.LIGHT, location="Bedroom"),
        Device(
            id="hall-thermostat",
            name="Thermostat",
            type=DeviceType.THERMOSTAT,
            location="Hall",
            is_on=True,
        ),
        Device(id="front-door-lock", name="Front Door", type=DeviceType.LOCK, location="Entrance"),
    ]


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Start every test with fresh settings and default structlog configuration."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="testing", log_format="console")


@pytest.fixture
def device_repository() -> DeviceRepository:
    return DeviceRepository(make_devices())


@pytest.fixture
def mode_store() -> HomeModeStore:
    return HomeModeStore()


@pytest.fixture
def device_service(device_repository, mode_store) -> DeviceService:
    return DeviceService(device_repository, mode_store)


@pytest.fixture
def scene_repository() -> SceneRepository:
    return SceneRepository()


@pytest.fixture
def scene_service(scene_repository, device_repository) -> SceneService:
    return SceneService(scene_repository, device_repository)


@pytest.fixture
def dispatcher(device_service, scene_service) -> ActionDispatcher:
    return ActionDispatcher(device_service, scene_service)


@pytest.fixture
def rule_repository() -> AutomationRuleRepository:
    return AutomationRuleRepository()


@pytest.fixture
def rule_service(rule_repository) -> RuleService:
    return RuleService(rule_repository)


@pytest.fixture
def rule_engine(rule_repository, dispatcher) -> RuleEngine:
    return RuleEngine(rule_repository, dispatcher)


@pytest.fixture
def container(settings):
    return build_container(settings, make_devices())


@pytest.fixture
def app(settings, container):
    return create_app(settings, container)


@pytest_asyncio.fixture
async def client(app):
    """HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
