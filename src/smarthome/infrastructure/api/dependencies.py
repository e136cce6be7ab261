"""FastAPI dependencies resolving services from application state."""

from typing import Annotated

from fastapi import Depends, Request

from smarthome.domain.services import DeviceService, RuleEngine, RuleService, SceneService
from smarthome.infrastructure.api.container import ServiceContainer


def get_container(request: Request) -> ServiceContainer:
    """Return the container created by the application factory."""
    return request.app.state.container


def get_device_service(
    container: Annotated[ServiceContainer, Depends(get_container)],
) -> DeviceService:
    return container.device_service


def get_scene_service(
    container: Annotated[ServiceContainer, Depends(get_container)],
) -> SceneService:
    return container.scene_service


def get_rule_service(
    container: Annotated[ServiceContainer, Depends(get_container)],
) -> RuleService:
    return container.rule_service


def get_rule_engine(
    container: Annotated[ServiceContainer, Depends(get_container)],
) -> RuleEngine:
    return container.rule_engine


DeviceServiceDep = Annotated[DeviceService, Depends(get_device_service)]
SceneServiceDep = Annotated[SceneService, Depends(get_scene_service)]
RuleServiceDep = Annotated[RuleService, Depends(get_rule_service)]
RuleEngineDep = Annotated[RuleEngine, Depends(get_rule_engine)]
