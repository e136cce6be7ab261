"""In-memory stores backing the services."""

from .automation_rule_repository import AutomationRuleRepository
from .device_repository import DeviceRepository
from .home_mode_store import HomeModeStore
from .scene_repository import SceneRepository

__all__ = [
    "AutomationRuleRepository",
    "DeviceRepository",
    "HomeModeStore",
    "SceneRepository",
]
