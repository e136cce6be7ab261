"""Trigger-condition interpreter API."""

from collections.abc import Mapping
from typing import Any

from smarthome.core.config import get_settings
from smarthome.core.logging import get_logger

from .ast import And, BooleanVar, Comparison, Expression, Not, Or, StringEquals, render
from .context import EvaluationContext
from .evaluator import evaluate
from .parser import ExpressionParser

logger = get_logger(__name__)


def parse_rule(rule: str) -> Expression:
    """Parse condition text into a fresh expression tree."""
    return ExpressionParser().parse(rule)


def evaluate_expression(rule: str | None, variables: Mapping[str, Any] | None) -> dict[str, Any]:
    """Evaluate condition text against loosely-typed variables.

    A blank ``rule`` is replaced by the configured ``default_interpreter_rule``.

    Returns:
        Detail dict with the rule text actually evaluated, the variables, the
        boolean result and the canonical rendering of the parsed tree.
    """
    text = rule if rule and rule.strip() else get_settings().default_interpreter_rule
    expression = parse_rule(text)
    context = EvaluationContext.from_variables(variables)
    result = evaluate(expression, context)
    logger.info("Rule evaluated", rule=text, result=result)
    logger.debug("Evaluation context", context=context.as_dict())
    return {
        "rule": text,
        "variables": dict(variables or {}),
        "result": result,
        "expression": render(expression),
    }


__all__ = [
    "And",
    "BooleanVar",
    "Comparison",
    "EvaluationContext",
    "Expression",
    "ExpressionParser",
    "Not",
    "Or",
    "StringEquals",
    "evaluate",
    "evaluate_expression",
    "parse_rule",
    "render",
]
