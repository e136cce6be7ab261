"""Outcome records for executed action-script statements."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from smarthome.core.exceptions import ErrorKind


class ActionStatus(str, Enum):
    """Outcome of a single statement."""

    OK = "ok"
    ERROR = "error"
    IGNORED = "ignored"
    NOOP = "noop"


@dataclass
class ActionResult:
    """Result of dispatching one statement.

    Attributes:
        statement: The statement text as written in the script.
        status: Outcome of the statement.
        action: Canonical action name (``turn_on``, ``room_off``, ``scene``...).
        message: Explanation for ignored, failed and no-op statements.
        kind: Error classification for failed or ignored statements.
        payload: Action-specific data (device, devices, room, mode, scene).
    """

    statement: str
    status: ActionStatus
    action: str | None = None
    message: str | None = None
    kind: ErrorKind | None = None
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == ActionStatus.OK

    def to_dict(self) -> dict[str, Any]:
        """Flatten into a JSON-friendly dict."""
        data: dict[str, Any] = {"statement": self.statement, "status": self.status.value}
        if self.action is not None:
            data["action"] = self.action
        if self.message is not None:
            data["message"] = self.message
        if self.kind is not None:
            data["kind"] = self.kind.value
        data.update(self.payload)
        return data
