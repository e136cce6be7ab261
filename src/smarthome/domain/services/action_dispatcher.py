"""Executes action-script statements against the home.

Every statement yields exactly one ``ActionResult``. A failing statement is
recorded as an error and the remaining statements still run; nothing is
rolled back.
"""

from typing import Any

from smarthome.core.exceptions import ErrorKind, SmartHomeError
from smarthome.core.logging import get_logger
from smarthome.core.scripting import (
    ActionResult,
    ActionScriptParser,
    ActionStatus,
    ScriptStatement,
)
from smarthome.domain.entities.home_mode import HomeMode
from smarthome.domain.services.device_service import DeviceService
from smarthome.domain.services.scene_service import SceneService

logger = get_logger(__name__)

NO_SCRIPT_MESSAGE = "No action script provided"


class ActionDispatcher:
    """Dispatches parsed statements on their function name."""

    def __init__(
        self,
        device_service: DeviceService,
        scene_service: SceneService,
        parser: ActionScriptParser | None = None,
    ):
        """Initialize the dispatcher.

        Args:
            device_service: Device registry and home-mode owner.
            scene_service: Scene store used by scene statements.
            parser: Script parser; a default one is created if omitted.
        """
        self.device_service = device_service
        self.scene_service = scene_service
        self.parser = parser or ActionScriptParser()

    def run_script(self, script: str | None) -> list[ActionResult]:
        """Parse and run a whole script, one result per statement."""
        statements = self.parser.parse(script)
        if not statements:
            return [ActionResult(statement="", status=ActionStatus.NOOP, message=NO_SCRIPT_MESSAGE)]
        return [self.dispatch(statement) for statement in statements]

    def dispatch(self, statement: ScriptStatement) -> ActionResult:
        """Run a single statement, never raising."""
        if not statement.is_valid:
            return ActionResult(
                statement=statement.text,
                status=ActionStatus.IGNORED,
                message=statement.error,
                kind=ErrorKind.IGNORED,
            )

        function = statement.function
        argument = statement.argument
        try:
            result = self._execute(statement.text, function, argument)
        except Exception as e:
            kind = e.kind if isinstance(e, SmartHomeError) else ErrorKind.ACTION_FAILED
            logger.warning(
                "Action failed",
                statement=statement.text,
                error=str(e),
                exc_type=type(e).__name__,
            )
            return ActionResult(
                statement=statement.text,
                status=ActionStatus.ERROR,
                action=function,
                message=str(e),
                kind=kind,
            )

        logger.info("Action dispatched", statement=statement.text, status=result.status.value)
        return result

    def _execute(self, text: str, function: str, argument: str) -> ActionResult:
        payload: dict[str, Any]

        if function in ("turn_on", "on"):
            action = "turn_on"
            payload = {"device": self.device_service.control_device(argument, True).to_dict()}
        elif function in ("turn_off", "off"):
            action = "turn_off"
            payload = {"device": self.device_service.control_device(argument, False).to_dict()}
        elif function == "toggle":
            action = "toggle"
            current = self.device_service.get_device(argument)
            device = self.device_service.control_device(argument, not current.is_on)
            payload = {"device": device.to_dict()}
        elif function in ("room_on", "room_off"):
            action = function
            devices = self.device_service.control_room(argument, function == "room_on")
            payload = {"room": argument, "devices": [d.to_dict() for d in devices]}
        elif function in ("mode", "set_mode"):
            action = "mode"
            mode = self.device_service.set_home_mode(HomeMode.parse(argument))
            payload = {"mode": mode.value}
        elif function in ("scene", "activate_scene", "apply_scene"):
            action = "scene"
            payload = {"scene": argument, "result": self.scene_service.apply_scene(argument)}
        else:
            return ActionResult(
                statement=text,
                status=ActionStatus.IGNORED,
                message=f"Unknown action: {function}",
                kind=ErrorKind.IGNORED,
            )

        return ActionResult(statement=text, status=ActionStatus.OK, action=action, payload=payload)
