"""Expression tree for trigger conditions.

The tree is a closed set of immutable data shapes. Nodes carry no behaviour;
``smarthome.core.rules.evaluator.evaluate`` switches on the node type.
"""

from dataclasses import dataclass
from typing import Union

COMPARISON_OPERATORS = (">=", "<=", "==", "!=", ">", "<")


@dataclass(frozen=True)
class BooleanVar:
    """Reads a boolean variable (e.g. ``motion``)."""

    name: str


@dataclass(frozen=True)
class Comparison:
    """Compares an integer variable against a literal (e.g. ``hour >= 18``)."""

    name: str
    operator: str
    value: int


@dataclass(frozen=True)
class StringEquals:
    """Checks a string variable for exact equality (e.g. ``mode=NIGHT``)."""

    name: str
    value: str


@dataclass(frozen=True)
class And:
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Or:
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Not:
    operand: "Expression"


Expression = Union[BooleanVar, Comparison, StringEquals, And, Or, Not]


def render(node: Expression) -> str:
    """Render an expression tree back to canonical text.

    Binary connectives are parenthesised so the grouping chosen by the
    parser is visible, e.g. ``a OR b AND c`` renders as ``((a OR b) AND c)``.
    """
    if isinstance(node, BooleanVar):
        return node.name
    if isinstance(node, Comparison):
        return f"{node.name} {node.operator} {node.value}"
    if isinstance(node, StringEquals):
        return f'{node.name} = "{node.value}"'
    if isinstance(node, And):
        return f"({render(node.left)} AND {render(node.right)})"
    if isinstance(node, Or):
        return f"({render(node.left)} OR {render(node.right)})"
    if isinstance(node, Not):
        return f"NOT {render(node.operand)}"
    raise TypeError(f"Unknown expression node: {type(node).__name__}")
