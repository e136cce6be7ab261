"""Domain entities for the smart home.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from smarthome.domain.entities.automation_rule import AutomationRule
from smarthome.domain.entities.device import Device, DeviceType
from smarthome.domain.entities.home_mode import HomeMode
from smarthome.domain.entities.rule_definition import (
    Action,
    Condition,
    RuleBuilder,
    RuleDefinition,
    RuleValidationError,
    Trigger,
)
from smarthome.domain.entities.scene import Scene

__all__ = [
    "Action",
    "AutomationRule",
    "Condition",
    "Device",
    "DeviceType",
    "HomeMode",
    "RuleBuilder",
    "RuleDefinition",
    "RuleValidationError",
    "Scene",
    "Trigger",
]
