"""Variable store used while evaluating trigger conditions."""

import math
from collections.abc import Mapping
from typing import Any


class EvaluationContext:
    """Three independent typed variable namespaces.

    A name may live in more than one namespace at once; each lookup only
    consults its own namespace. Missing names resolve to ``False``, ``0`` and
    ``""`` respectively, so lookups never fail.
    """

    def __init__(self) -> None:
        self._booleans: dict[str, bool] = {}
        self._integers: dict[str, int] = {}
        self._strings: dict[str, str] = {}

    @classmethod
    def from_variables(cls, variables: Mapping[str, Any] | None) -> "EvaluationContext":
        """Build a context, classifying each value by its Python type.

        ``bool`` values go to the boolean namespace, other numbers are
        truncated into the integer namespace and anything else is stored as
        its string form. ``None`` values and non-finite floats (``inf``,
        ``nan``) are skipped, so their names fall back to the defaults.
        """
        context = cls()
        for name, value in (variables or {}).items():
            if value is None:
                continue
            # bool is a subclass of int, so it must be checked first
            if isinstance(value, bool):
                context.set_boolean(name, value)
            elif isinstance(value, float) and not math.isfinite(value):
                continue
            elif isinstance(value, (int, float)):
                context.set_integer(name, int(value))
            else:
                context.set_string(name, str(value))
        return context

    def set_boolean(self, name: str, value: bool) -> None:
        self._booleans[name] = value

    def get_boolean(self, name: str) -> bool:
        return self._booleans.get(name, False)

    def set_integer(self, name: str, value: int) -> None:
        self._integers[name] = value

    def get_integer(self, name: str) -> int:
        return self._integers.get(name, 0)

    def set_string(self, name: str, value: str) -> None:
        self._strings[name] = value

    def get_string(self, name: str) -> str:
        return self._strings.get(name, "")

    def as_dict(self) -> dict[str, dict[str, Any]]:
        """Snapshot of all three namespaces."""
        return {
            "booleans": dict(self._booleans),
            "integers": dict(self._integers),
            "strings": dict(self._strings),
        }
