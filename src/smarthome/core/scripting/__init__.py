"""Action-script parsing primitives."""

from .parser import ActionScriptParser, ScriptStatement, strip_quotes
from .results import ActionResult, ActionStatus

__all__ = [
    "ActionResult",
    "ActionScriptParser",
    "ActionStatus",
    "ScriptStatement",
    "strip_quotes",
]
