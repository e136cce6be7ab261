"""Wiring of stores and services.

One ``ServiceContainer`` is created per application; collaborators are
passed to each service explicitly.
"""

from dataclasses import dataclass

from smarthome.core.config import Settings, get_settings
from smarthome.domain.entities.device import Device
from smarthome.domain.entities.home_mode import HomeMode
from smarthome.domain.services import (
    ActionDispatcher,
    DeviceService,
    RuleEngine,
    RuleService,
    SceneService,
)
from smarthome.infrastructure.persistence.repositories import (
    AutomationRuleRepository,
    DeviceRepository,
    HomeModeStore,
    SceneRepository,
)


@dataclass
class ServiceContainer:
    """Services sharing one set of stores."""

    device_service: DeviceService
    scene_service: SceneService
    rule_service: RuleService
    dispatcher: ActionDispatcher
    rule_engine: RuleEngine


def build_container(
    settings: Settings | None = None, devices: list[Device] | None = None
) -> ServiceContainer:
    """Create stores and services.

    Args:
        settings: Settings to use; loaded from the environment if omitted.
        devices: Devices to register up front.
    """
    settings = settings or get_settings()

    device_repository = DeviceRepository(devices)
    scene_repository = SceneRepository()
    rule_repository = AutomationRuleRepository()
    mode_store = HomeModeStore(HomeMode.parse(settings.default_home_mode))

    device_service = DeviceService(device_repository, mode_store)
    scene_service = SceneService(scene_repository, device_repository)
    dispatcher = ActionDispatcher(device_service, scene_service)
    return ServiceContainer(
        device_service=device_service,
        scene_service=scene_service,
        rule_service=RuleService(rule_repository, settings.default_rule_priority),
        dispatcher=dispatcher,
        rule_engine=RuleEngine(rule_repository, dispatcher),
    )
