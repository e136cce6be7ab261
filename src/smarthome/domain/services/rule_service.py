"""Automation rule management service."""

from typing import Any

from smarthome.core.exceptions import NotFoundError, ValidationError
from smarthome.core.logging import get_logger
from smarthome.core.scripting import ActionScriptParser
from smarthome.domain.entities.automation_rule import AutomationRule
from smarthome.domain.entities.rule_definition import (
    RuleBuilder,
    RuleDefinition,
    RuleValidationError,
)
from smarthome.infrastructure.persistence.repositories import AutomationRuleRepository

logger = get_logger(__name__)


def _require_text(value: str | None, message: str) -> str:
    normalized = (value or "").strip()
    if not normalized:
        raise ValidationError(message)
    return normalized


class RuleService:
    """Create, list, toggle and delete stored automation rules."""

    def __init__(self, rule_repository: AutomationRuleRepository, default_priority: int = 5):
        self.rule_repository = rule_repository
        self.default_priority = default_priority
        self.parser = ActionScriptParser()

    def list_rules(self) -> list[AutomationRule]:
        """List rules by priority (highest first), then name (case-insensitive)."""
        by_name = sorted(self.rule_repository.list_all(), key=lambda r: r.name.casefold())
        return sorted(by_name, key=lambda r: r.priority, reverse=True)

    def get_rule(self, rule_id: int) -> AutomationRule:
        """Get a rule by ID.

        Raises:
            NotFoundError: If no rule has this ID.
        """
        rule = self.rule_repository.get_by_id(rule_id)
        if rule is None:
            raise NotFoundError("Rule", rule_id)
        return rule

    def create_rule(
        self,
        name: str,
        trigger_condition: str,
        action_script: str,
        description: str | None = None,
        priority: int | None = None,
    ) -> AutomationRule:
        """Create and store a rule.

        Raises:
            ValidationError: If the name, condition or script is blank.
        """
        rule = AutomationRule(
            name=_require_text(name, "Rule name is required"),
            trigger_condition=_require_text(trigger_condition, "Trigger condition is required"),
            action_script=_require_text(action_script, "Action script is required"),
            description=(description or "").strip() or None,
            priority=self.default_priority if priority is None else priority,
        )
        self.rule_repository.save(rule)
        logger.info("Rule created", rule_id=rule.id, rule_name=rule.name, priority=rule.priority)
        return rule

    def toggle_rule(self, rule_id: int) -> AutomationRule:
        rule = self.get_rule(rule_id)
        rule.is_enabled = not rule.is_enabled
        self.rule_repository.save(rule)
        logger.info("Rule toggled", rule_id=rule_id, enabled=rule.is_enabled)
        return rule

    def delete_rule(self, rule_id: int) -> dict[str, Any]:
        rule = self.get_rule(rule_id)
        self.rule_repository.delete(rule)
        logger.info("Rule deleted", rule_id=rule_id)
        return {"rule_id": rule_id, "rule_name": rule.name, "deleted": True}

    def to_definition(self, rule_id: int) -> RuleDefinition:
        """Describe a stored rule as a structured ``RuleDefinition``.

        Each well-formed statement of the action script becomes one action;
        malformed statements are left out.

        Raises:
            NotFoundError: If no rule has this ID.
            RuleValidationError: If the script has no well-formed statement.
        """
        rule = self.get_rule(rule_id)
        builder = (
            RuleBuilder()
            .id(f"rule-{rule.id}")
            .name(rule.name)
            .description(rule.description)
            .enabled(rule.is_enabled)
            .priority(rule.priority)
        )
        for statement in self.parser.split(rule.action_script):
            try:
                builder.action(statement)
            except RuleValidationError:
                logger.debug("Statement left out of definition", statement=statement)
        return builder.build()
