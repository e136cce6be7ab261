"""Evaluator for expression trees."""

from .ast import And, BooleanVar, Comparison, Expression, Not, Or, StringEquals
from .context import EvaluationContext


def _compare(left: int, operator: str, right: int) -> bool:
    if operator == ">":
        return left > right
    if operator == "<":
        return left < right
    if operator == ">=":
        return left >= right
    if operator == "<=":
        return left <= right
    if operator == "==":
        return left == right
    if operator == "!=":
        return left != right
    return False


def evaluate(node: Expression, context: EvaluationContext) -> bool:
    """Evaluate a node against a context.

    Evaluation is a pure function of the tree and the context; missing
    variables fall back to the context defaults.
    """
    if isinstance(node, BooleanVar):
        return context.get_boolean(node.name)

    if isinstance(node, Comparison):
        return _compare(context.get_integer(node.name), node.operator, node.value)

    if isinstance(node, StringEquals):
        return context.get_string(node.name) == node.value

    if isinstance(node, And):
        return evaluate(node.left, context) and evaluate(node.right, context)

    if isinstance(node, Or):
        return evaluate(node.left, context) or evaluate(node.right, context)

    if isinstance(node, Not):
        return not evaluate(node.operand, context)

    raise TypeError(f"Unknown expression node: {type(node).__name__}")
