"""Rule engine: evaluates a stored rule and runs its actions on a match."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from smarthome.core.exceptions import NotFoundError
from smarthome.core.logging import LoggingContext, get_logger
from smarthome.core.rules import EvaluationContext, ExpressionParser, evaluate, render
from smarthome.core.scripting import ActionResult, ActionStatus
from smarthome.domain.entities.automation_rule import AutomationRule
from smarthome.domain.services.action_dispatcher import ActionDispatcher
from smarthome.infrastructure.persistence.repositories import AutomationRuleRepository

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RuleRunResult:
    """Outcome of one rule run.

    Attributes:
        rule: The rule after the run (``last_triggered`` updated if executed).
        variables: Variables the condition was evaluated against.
        matched: Whether the trigger condition held.
        execute_actions: Whether the caller asked for actions to run.
        executed: Whether the action script actually ran.
        actions: One result per script statement (empty if not executed).
        interpreter_detail: Rule text, variables, result and parsed expression.
    """

    rule: AutomationRule
    variables: dict[str, Any]
    matched: bool
    execute_actions: bool
    executed: bool = False
    actions: list[ActionResult] = field(default_factory=list)
    interpreter_detail: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.rule.to_dict(),
            "variables": self.variables,
            "matched": self.matched,
            "execute_actions": self.execute_actions,
            "executed": self.executed,
            "actions": [a.to_dict() for a in self.actions],
            "interpreter": self.interpreter_detail,
        }


class RuleEngine:
    """Orchestrates condition evaluation and action dispatch for stored rules.

    The expression tree is rebuilt from the stored text on every run; the
    engine keeps no state between runs.
    """

    def __init__(
        self,
        rule_repository: AutomationRuleRepository,
        dispatcher: ActionDispatcher,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize the engine.

        Args:
            rule_repository: Store the rules are read from and stamped in.
            dispatcher: Runs action scripts of matched rules.
            clock: Source of the ``last_triggered`` timestamp.
        """
        self.rule_repository = rule_repository
        self.dispatcher = dispatcher
        self.clock = clock

    def run(
        self,
        rule_id: int,
        variables: Mapping[str, Any] | None = None,
        execute_actions: bool = False,
    ) -> RuleRunResult:
        """Evaluate a rule and, if asked and it matches, run its actions.

        Args:
            rule_id: ID of the stored rule.
            variables: Condition variables; booleans, numbers and strings are
                sorted into their namespaces by type.
            execute_actions: Run the action script when the rule matches.

        Returns:
            RuleRunResult describing the evaluation and any actions.

        Raises:
            NotFoundError: If no rule has this ID.
        """
        rule = self.rule_repository.get_by_id(rule_id)
        if rule is None:
            raise NotFoundError("Rule", rule_id)

        variables = dict(variables or {})
        with LoggingContext(rule_id=str(rule_id)):
            expression = ExpressionParser().parse(rule.trigger_condition)
            context = EvaluationContext.from_variables(variables)
            matched = evaluate(expression, context)
            logger.debug("Evaluation context", context=context.as_dict())
            logger.info(
                "Rule condition evaluated",
                rule_name=rule.name,
                condition=rule.trigger_condition,
                matched=matched,
            )

            result = RuleRunResult(
                rule=rule,
                variables=variables,
                matched=matched,
                execute_actions=execute_actions,
                interpreter_detail={
                    "rule": rule.trigger_condition,
                    "variables": variables,
                    "result": matched,
                    "expression": render(expression),
                },
            )

            if matched and execute_actions and rule.is_enabled:
                result.actions = self.dispatcher.run_script(rule.action_script)
                result.executed = True
                rule.last_triggered = self.clock()
                self.rule_repository.save(rule)
                logger.info(
                    "Rule actions executed",
                    statements=len(result.actions),
                    failed=sum(1 for a in result.actions if a.status == ActionStatus.ERROR),
                )
            elif matched and execute_actions:
                logger.info("Rule matched but is disabled; actions skipped")

        return result
