"""Domain services for the smart home.

Services contain business logic that doesn't naturally fit within a single
entity. Collaborators are passed in explicitly; nothing here is global.
"""

from smarthome.domain.services.action_dispatcher import ActionDispatcher
from smarthome.domain.services.device_service import DeviceService
from smarthome.domain.services.rule_context import RuleContext
from smarthome.domain.services.rule_engine import RuleEngine, RuleRunResult
from smarthome.domain.services.rule_service import RuleService
from smarthome.domain.services.scene_service import SceneService
from smarthome.domain.services.variable_parser import (
    coerce_value,
    coerce_variables,
    parse_variables_text,
)

__all__ = [
    "ActionDispatcher",
    "DeviceService",
    "RuleContext",
    "RuleEngine",
    "RuleRunResult",
    "RuleService",
    "SceneService",
    "coerce_value",
    "coerce_variables",
    "parse_variables_text",
]
