"""Parser for trigger-condition expressions.

The parser works by scanning for keywords rather than tokenizing. Its
grouping rules are unusual:

* ``NOT `` at the start negates everything after it, so ``NOT a AND b``
  means ``NOT (a AND b)``.
* The first `` AND `` in the text is always the outermost split, before any
  `` OR `` is considered. ``a OR b AND c`` therefore groups as
  ``(a OR b) AND c``, not ``a OR (b AND c)``.
"""

import re

from .ast import (
    COMPARISON_OPERATORS,
    And,
    BooleanVar,
    Comparison,
    Expression,
    Not,
    Or,
    StringEquals,
)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int | None:
    """Parse a plain decimal integer, rejecting anything ``int()`` would stretch to accept."""
    if INTEGER_PATTERN.fullmatch(text):
        return int(text)
    return None


class ExpressionParser:
    """Turns condition text into an expression tree."""

    def parse(self, rule: str) -> Expression:
        """Parse the whole rule text."""
        rule = rule.strip()

        if rule.startswith("NOT "):
            return Not(self.parse(rule[4:]))

        and_index = rule.find(" AND ")
        if and_index > 0:
            return And(self.parse(rule[:and_index]), self.parse(rule[and_index + 5 :]))

        or_index = rule.find(" OR ")
        if or_index > 0:
            return Or(self.parse(rule[:or_index]), self.parse(rule[or_index + 4 :]))

        for operator in COMPARISON_OPERATORS:
            op_index = rule.find(operator)
            if op_index > 0:
                name = rule[:op_index].strip()
                value_text = rule[op_index + len(operator) :].strip()
                value = _parse_int(value_text)
                if value is None:
                    # Non-numeric right-hand side degrades to string equality
                    return StringEquals(name, value_text)
                return Comparison(name, operator, value)

        eq_index = rule.find("=")
        if eq_index > 0 and rule[eq_index - 1] not in "!><":
            name = rule[:eq_index].strip()
            value = rule[eq_index + 1 :].strip().replace("'", "").replace('"', "")
            return StringEquals(name, value)

        return BooleanVar(rule)
