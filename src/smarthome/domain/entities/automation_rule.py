"""Stored automation rule entity.

A stored rule keeps its trigger condition and its actions as text: the
condition is interpreted by ``smarthome.core.rules`` and the action script
is run by the action dispatcher.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class AutomationRule:
    """Automation rule as persisted by the rule store.

    Attributes:
        name: Display name.
        trigger_condition: Condition text, e.g. ``motion AND hour >= 18``.
        action_script: Script text, e.g. ``turn_on(living-light-1)``.
        id: Identifier assigned by the rule store (None until saved).
        description: Optional description.
        is_enabled: Disabled rules are evaluated but never run actions.
        priority: Higher priorities sort first.
        created_at: Creation timestamp.
        last_triggered: When the actions last ran.
    """

    name: str
    trigger_condition: str
    action_script: str
    id: int | None = None
    description: str | None = None
    is_enabled: bool = True
    priority: int = 5
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_triggered: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "trigger_condition": self.trigger_condition,
            "action_script": self.action_script,
            "enabled": self.is_enabled,
            "priority": self.priority,
            "created_at": self.created_at.isoformat(),
            "last_triggered": self.last_triggered.isoformat() if self.last_triggered else None,
        }
