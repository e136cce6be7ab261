"""SmartHome Rules - automation rule engine for a smart home.

Trigger conditions are small boolean expressions over named variables;
actions are scripts of function-call statements run against devices,
scenes and the home mode.
"""

__version__ = "0.1.0"

from smarthome.infrastructure.api.app import app

__all__ = ["app", "__version__"]
