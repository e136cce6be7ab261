"""In-memory repository for automation rules."""

from itertools import count
from threading import RLock

from smarthome.domain.entities.automation_rule import AutomationRule


class AutomationRuleRepository:
    """Repository for managing AutomationRule entities."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._rules: dict[int, AutomationRule] = {}
        self._ids = count(1)

    def get_by_id(self, rule_id: int) -> AutomationRule | None:
        """Get a rule by its ID.

        Args:
            rule_id: Rule ID.

        Returns:
            The rule if found, None otherwise.
        """
        with self._lock:
            return self._rules.get(rule_id)

    def list_all(self) -> list[AutomationRule]:
        with self._lock:
            return list(self._rules.values())

    def list_enabled(self) -> list[AutomationRule]:
        """Get enabled rules, highest priority first."""
        with self._lock:
            enabled = [r for r in self._rules.values() if r.is_enabled]
        return sorted(enabled, key=lambda r: r.priority, reverse=True)

    def save(self, rule: AutomationRule) -> AutomationRule:
        """Insert or update a rule, assigning an ID on first save."""
        with self._lock:
            if rule.id is None:
                rule.id = next(self._ids)
            self._rules[rule.id] = rule
            return rule

    def delete(self, rule: AutomationRule) -> None:
        with self._lock:
            self._rules.pop(rule.id, None)
