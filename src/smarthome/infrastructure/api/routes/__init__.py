"""API Routes for SmartHome Rules."""

from .devices_router import router as devices_router
from .rules_router import interpreter_router
from .rules_router import router as rules_router
from .scenes_router import router as scenes_router

__all__ = [
    "devices_router",
    "interpreter_router",
    "rules_router",
    "scenes_router",
]
