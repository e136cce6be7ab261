"""Structured rule model and its fluent builder.

A ``RuleDefinition`` describes a rule as typed ``(type, value)`` pairs
instead of expression text. Triggers and conditions are checked, and
actions executed, through a ``RuleContext``.
"""

from dataclasses import dataclass, field
from datetime import time
from typing import TYPE_CHECKING
import uuid

from smarthome.core.exceptions import ValidationError
from smarthome.core.scripting import ActionScriptParser

if TYPE_CHECKING:
    from smarthome.domain.services.rule_context import RuleContext

# Script functions whose action type is not simply their upper-cased name
_STATEMENT_ACTION_ALIASES = {"on": "TURN_ON", "off": "TURN_OFF"}


class RuleValidationError(ValidationError):
    """Raised when a rule definition cannot be built."""


@dataclass(frozen=True)
class Trigger:
    """An event that can activate a rule, e.g. ``("MOTION_DETECTED", "hall")``."""

    type: str
    value: str


@dataclass(frozen=True)
class Condition:
    """A requirement that must hold for a rule to fire, e.g. ``("MODE_EQUALS", "NIGHT")``."""

    type: str
    value: str


@dataclass(frozen=True)
class Action:
    """An operation run when a rule fires, e.g. ``("TURN_ON", "living-light-1")``."""

    type: str
    value: str


def _parse_time(value: time | str) -> time:
    if isinstance(value, time):
        return value
    try:
        return time.fromisoformat(value.strip())
    except ValueError:
        raise RuleValidationError(f"Invalid time of day: {value!r}") from None


@dataclass(frozen=True)
class RuleDefinition:
    """Immutable structured rule.

    Attributes:
        name: Rule name (never blank).
        description: Optional description.
        triggers: Any one matching trigger activates the rule; none means always.
        conditions: All must hold; none means always satisfied.
        actions: Executed in order when the rule fires (never empty).
        enabled: Disabled rules never fire.
        priority: Higher priorities are more important.
        active_from: Start of the daily active window.
        active_to: End of the daily active window. The window only applies
            when both bounds are set, and wraps midnight when
            ``active_from`` is later than ``active_to``.
        id: Identifier, generated when not supplied.
    """

    name: str
    actions: tuple[Action, ...]
    description: str | None = None
    triggers: tuple[Trigger, ...] = ()
    conditions: tuple[Condition, ...] = ()
    enabled: bool = True
    priority: int = 5
    active_from: time | None = time.min
    active_to: time | None = time.max
    id: str = field(default_factory=lambda: f"rule-{uuid.uuid4().hex[:8]}")

    def __post_init__(self) -> None:
        """Validate the definition after initialization."""
        if not self.name or not self.name.strip():
            raise RuleValidationError("Rule name is required")
        if not self.actions:
            raise RuleValidationError("Rule must have at least one action")

    def is_within_active_window(self, now: time) -> bool:
        """Check whether a time of day lies in the active window."""
        if self.active_from is None or self.active_to is None:
            return True
        if self.active_from <= self.active_to:
            return self.active_from <= now <= self.active_to
        return now >= self.active_from or now <= self.active_to

    def is_triggered(self, context: "RuleContext") -> bool:
        if not self.triggers:
            return True
        return any(context.check_trigger(t.type, t.value) for t in self.triggers)

    def conditions_met(self, context: "RuleContext") -> bool:
        return all(context.check_condition(c.type, c.value) for c in self.conditions)

    def should_execute(self, context: "RuleContext") -> bool:
        """Decide whether the rule fires in the given context."""
        return (
            self.enabled
            and self.is_within_active_window(context.now().time())
            and self.is_triggered(context)
            and self.conditions_met(context)
        )

    def execute(self, context: "RuleContext") -> list[Action]:
        """Run every action in order.

        There is no rollback: an action that raises stops the run and leaves
        the effects of earlier actions in place.

        Returns:
            The actions the context actually applied.
        """
        applied = []
        for action in self.actions:
            if context.execute_action(action.type, action.value):
                applied.append(action)
        return applied

    def fire(self, context: "RuleContext") -> list[Action]:
        """Execute the actions if the rule should fire; return what was applied."""
        if not self.should_execute(context):
            return []
        return self.execute(context)


class RuleBuilder:
    """Fluent builder for ``RuleDefinition``.

    Example:
        rule = (
            RuleBuilder()
            .name("Hall light at night")
            .when_motion_detected("hall-sensor")
            .only_in_mode("NIGHT")
            .then_turn_on("hall-light")
            .build()
        )
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._description: str | None = None
        self._triggers: list[Trigger] = []
        self._conditions: list[Condition] = []
        self._actions: list[Action] = []
        self._enabled = True
        self._priority = 5
        self._active_from: time | None = time.min
        self._active_to: time | None = time.max
        self._id: str | None = None
        self._parser = ActionScriptParser()

    def id(self, rule_id: str) -> "RuleBuilder":
        self._id = rule_id
        return self

    def name(self, name: str) -> "RuleBuilder":
        self._name = name
        return self

    def description(self, description: str | None) -> "RuleBuilder":
        self._description = description
        return self

    def enabled(self, enabled: bool = True) -> "RuleBuilder":
        self._enabled = enabled
        return self

    def priority(self, priority: int) -> "RuleBuilder":
        self._priority = priority
        return self

    def active_between(self, start: time | str, end: time | str) -> "RuleBuilder":
        """Restrict the rule to a daily window (``"22:00"`` to ``"06:00"`` wraps midnight)."""
        self._active_from = _parse_time(start)
        self._active_to = _parse_time(end)
        return self

    def trigger(self, trigger: Trigger | str, value: str | None = None) -> "RuleBuilder":
        if not isinstance(trigger, Trigger):
            trigger = Trigger(trigger, value or "")
        self._triggers.append(trigger)
        return self

    def condition(self, condition: Condition | str, value: str | None = None) -> "RuleBuilder":
        if not isinstance(condition, Condition):
            condition = Condition(condition, value or "")
        self._conditions.append(condition)
        return self

    def action(self, action: Action | str, value: str | None = None) -> "RuleBuilder":
        """Add an action.

        Accepts an ``Action``, a ``(type, value)`` pair, or a single
        action-script statement such as ``"turn_on(living-light-1)"``.

        Raises:
            RuleValidationError: If a statement is not of the form ``fn(arg)``.
        """
        if isinstance(action, Action):
            self._actions.append(action)
        elif value is not None:
            self._actions.append(Action(action, value))
        else:
            statement = self._parser.parse_statement(action)
            if not statement.is_valid:
                raise RuleValidationError(f"Invalid action '{action}': {statement.error}")
            action_type = _STATEMENT_ACTION_ALIASES.get(
                statement.function, statement.function.upper()
            )
            self._actions.append(Action(action_type, statement.argument))
        return self

    # Convenience triggers

    def when_motion_detected(self, sensor_id: str) -> "RuleBuilder":
        return self.trigger(Trigger("MOTION_DETECTED", sensor_id))

    def when_door_opened(self, door_id: str) -> "RuleBuilder":
        return self.trigger(Trigger("DOOR_OPENED", door_id))

    def when_temperature_above(self, degrees: float) -> "RuleBuilder":
        return self.trigger(Trigger("TEMP_ABOVE", str(degrees)))

    def when_temperature_below(self, degrees: float) -> "RuleBuilder":
        return self.trigger(Trigger("TEMP_BELOW", str(degrees)))

    # Convenience conditions

    def only_after(self, time_of_day: time | str) -> "RuleBuilder":
        return self.condition(Condition("TIME_AFTER", _parse_time(time_of_day).isoformat()))

    def only_before(self, time_of_day: time | str) -> "RuleBuilder":
        return self.condition(Condition("TIME_BEFORE", _parse_time(time_of_day).isoformat()))

    def only_in_mode(self, mode: str) -> "RuleBuilder":
        return self.condition(Condition("MODE_EQUALS", str(mode).upper()))

    # Convenience actions

    def then_turn_on(self, device_id: str) -> "RuleBuilder":
        return self.action(Action("TURN_ON", device_id))

    def then_turn_off(self, device_id: str) -> "RuleBuilder":
        return self.action(Action("TURN_OFF", device_id))

    def then_set_brightness(self, device_id: str, level: int) -> "RuleBuilder":
        return self.action(Action("SET_BRIGHTNESS", f"{device_id}:{level}"))

    def then_set_temperature(self, device_id: str, degrees: int) -> "RuleBuilder":
        return self.action(Action("SET_TEMPERATURE", f"{device_id}:{degrees}"))

    def then_notify(self, message: str) -> "RuleBuilder":
        return self.action(Action("NOTIFY", message))

    def build(self) -> RuleDefinition:
        """Create the rule.

        Raises:
            RuleValidationError: If the name is blank or there are no actions.
        """
        extra = {"id": self._id} if self._id else {}
        return RuleDefinition(
            name=(self._name or "").strip(),
            description=self._description,
            triggers=tuple(self._triggers),
            conditions=tuple(self._conditions),
            actions=tuple(self._actions),
            enabled=self._enabled,
            priority=self._priority,
            active_from=self._active_from,
            active_to=self._active_to,
            **extra,
        )
